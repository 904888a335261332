import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, connection
from django.utils.module_loading import import_string
from django_tenants.utils import get_public_schema_name, schema_context

from . import conf
from .exceptions import StorageNotReady

logger = logging.getLogger(__name__)

# Connection aliases whose course tables are known to exist. Migrated tables
# do not go away while the process runs, so only a positive answer is kept.
_ready_aliases = set()


class ModelDomainStore:
    """
    Read-only course lookups backed by the courses.Course and courses.Domain
    tables. Database failures surface as StorageNotReady.

    Both tables are shared apps and live in the public schema, so every probe
    and query runs there whatever course schema the connection is bound to.
    """

    def __init__(self, db=None):
        self.connection = connection if db is None else db

    @property
    def models(self):
        from courses.models import Course, Domain
        return Course, Domain

    def is_ready(self):
        """
        Whether the tables exist. This is about the data structure, not about
        courses having been created.
        """
        alias = getattr(self.connection, "alias", None)
        if alias in _ready_aliases:
            return True
        try:
            with schema_context(get_public_schema_name()):
                tables = set(self.connection.introspection.table_names())
        except DatabaseError as e:
            logger.warning(f"Could not introspect course tables: {e}")
            return False
        ready = all(model._meta.db_table in tables for model in self.models)
        if ready:
            _ready_aliases.add(alias)
        return ready

    def find_course(self, host):
        """Course mapped to `host`, or None. Soft-deleted courses never match."""
        _, Domain = self.models
        try:
            with schema_context(get_public_schema_name()):
                domain = (
                    Domain.objects
                    .select_related("tenant")
                    .filter(domain=host, tenant__is_deleted=False)
                    .first()
                )
        except DatabaseError as e:
            raise StorageNotReady(str(e)) from e
        return domain.tenant if domain else None

    def get_course(self, pk):
        """Non-deleted course by primary key, or None."""
        Course, _ = self.models
        try:
            with schema_context(get_public_schema_name()):
                return Course.objects.filter(pk=pk, is_deleted=False).first()
        except (ValidationError, ValueError):
            logger.info(f"Ignoring malformed course key {pk!r}")
            return None
        except DatabaseError as e:
            raise StorageNotReady(str(e)) from e


def get_domain_store():
    return import_string(conf.domain_store_path())()
