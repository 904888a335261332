from django.db import connection, models
from django_tenants.models import TenantMixin, DomainMixin
from core.models import BaseModel
from .signals import course_registered


class Course(TenantMixin, BaseModel):
    """Tenant model - each course gets its own schema and frontend host"""
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    # django-tenants required fields
    auto_create_schema = True
    # soft delete must not drop the schema
    auto_drop_schema = False

    class Meta:
        verbose_name = 'Course'
        verbose_name_plural = 'Courses'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def primary_domain(self):
        domain = self.domains.filter(is_primary=True).first()
        return domain.domain if domain else None

    def register_provider(self):
        """
        Bind this course to the running request: switch the connection to the
        course schema and let other apps hook course-scoped services.
        """
        connection.set_tenant(self)
        course_registered.send(sender=self.__class__, course=self)


class Domain(DomainMixin):
    """Hostname mapped to a course frontend"""
    class Meta:
        verbose_name = 'Domain'
        verbose_name_plural = 'Domains'

    def __str__(self):
        return self.domain
