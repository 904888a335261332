from dataclasses import dataclass

from django.db import models


class ResolutionStatus(models.TextChoices):
    CONTEXTUALIZED = "contextualized", "Pinned by session"
    MATCHED = "matched", "Matched by hostname"
    UNMAPPED = "unmapped", "No domain mapping"
    STORAGE_NOT_READY = "storage_not_ready", "Storage not ready"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of a course lookup.

    `storage_not_ready` is only kept for diagnostics; public callers see the
    same `course=None` they get for an unmapped host.
    """

    status: ResolutionStatus
    course: object = None

    @property
    def resolved(self):
        return self.course is not None

    @classmethod
    def unmapped(cls):
        return cls(ResolutionStatus.UNMAPPED)

    @classmethod
    def storage_not_ready(cls):
        return cls(ResolutionStatus.STORAGE_NOT_READY)
