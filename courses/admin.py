from django.contrib import admin
from .models import Course, Domain


class DomainInline(admin.TabularInline):
    model = Domain
    extra = 0
    fields = ['domain', 'is_primary']


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'slug',
        'primary_domain',
        'schema_name',
        'is_deleted',
        'created_at'
    ]
    list_filter = ['is_deleted', 'created_at']
    search_fields = ['name', 'slug', 'schema_name', 'domains__domain']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [DomainInline]
    fieldsets = (
        ('Course', {
            'fields': ('name', 'slug', 'description')
        }),
        ('System Information', {
            'fields': ('schema_name', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['restore_courses']

    def get_queryset(self, request):
        return Course.all_objects.all()

    def restore_courses(self, request, queryset):
        for course in queryset:
            course.restore()
        self.message_user(request, f"Restored {queryset.count()} courses.")
    restore_courses.short_description = "Restore selected courses"


@admin.register(Domain)
class DomainAdmin(admin.ModelAdmin):
    list_display = ['domain', 'tenant', 'is_primary']
    list_filter = ['is_primary']
    search_fields = ['domain', 'tenant__name']
    list_select_related = ['tenant']
