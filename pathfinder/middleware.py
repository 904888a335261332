import logging

from django.core.exceptions import ImproperlyConfigured
from django.db import connection
from django.utils.deprecation import MiddlewareMixin

from .context import Pathfinder
from .hosts import request_host

logger = logging.getLogger(__name__)


class PathfinderMiddleware(MiddlewareMixin):
    """Attach a Pathfinder for the request host as `request.pathfinder`.

    Resolution is lazy: nothing is queried until a view, template or
    decorator asks which course (if any) the request belongs to. Must be
    placed after SessionMiddleware.
    """

    def process_request(self, request):
        if not hasattr(request, 'session'):
            raise ImproperlyConfigured(
                "PathfinderMiddleware requires the session middleware to be "
                "installed. Insert 'django.contrib.sessions.middleware.SessionMiddleware' "
                "before 'pathfinder.middleware.PathfinderMiddleware'."
            )
        # A course schema bound by an earlier request must not leak into this one.
        connection.set_schema_to_public()

        host = request_host(request)
        request.pathfinder = Pathfinder(host, request.session)
        logger.debug(f"Pathfinder attached for host {host!r}")
