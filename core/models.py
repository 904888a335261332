from .mixins import UUIDModel, TimeStampedModel, SoftDeleteModel
from .managers import SoftDeleteManager, AllObjectsManager


class BaseModel(UUIDModel, TimeStampedModel, SoftDeleteModel):
    """Common base model: UUID PK, timestamps, and soft delete support."""

    objects = SoftDeleteManager()
    all_objects = AllObjectsManager()

    class Meta:
        abstract = True
