from django.db import models

class SoftDeleteManager(models.Manager):
    """Default manager: soft-deleted rows are invisible."""

    def get_queryset(self):
        return super().get_queryset().filter(is_deleted=False)

class AllObjectsManager(models.Manager):
    """Includes soft-deleted rows, for admin and maintenance."""
