from django.db import models


class HostOrigin(models.TextChoices):
    """Where a request came from, judged by its hostname."""
    FRONTEND = "frontend", "Course frontend"
    BACKEND = "backend", "Main backend"
    EXTERNAL = "external", "External source"
