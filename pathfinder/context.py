import logging

from core.constants import HostOrigin
from . import conf
from .exceptions import StorageNotReady
from .hosts import normalize_host
from .resolution import Resolution, ResolutionStatus
from .store import get_domain_store

logger = logging.getLogger(__name__)


class Pathfinder:
    """
    Assesses if the current request is part of a course frontend, the main
    backend, or neither.

    One instance lives for one request. `session` only needs get / item
    assignment / pop, which Django sessions and plain dicts both offer.
    """

    def __init__(self, host, session, store=None):
        self.host = host
        self.session = session
        self.store = store if store is not None else get_domain_store()
        self._resolution = None

    def __repr__(self):
        return f"<Pathfinder host={self.host!r}>"

    def normalize_host(self):
        return normalize_host(self.host)

    def resolve(self):
        """
        Resolution for this request, computed once. A contextualized course
        wins over the hostname.
        """
        if self._resolution is None:
            self._resolution = self._resolve()
            logger.debug(f"{self!r} resolved as {self._resolution.status}")
        return self._resolution

    def course(self):
        """
        Course mapped to the current hostname (or pinned in the session), or
        None when the visitor is not on a course frontend.
        """
        return self.resolve().course

    def is_frontend(self):
        return self.course() is not None

    def is_backend(self):
        """The host is one of the configured main-site hostnames."""
        host = self.normalize_host()
        if not host:
            return False
        return host == conf.main_host() or host in conf.main_hosts()

    def is_external(self):
        """Neither a course frontend nor the backend, e.g. a bot hitting the IP."""
        return not self.is_backend() and not self.is_frontend()

    def origin(self):
        if self.is_frontend():
            return HostOrigin.FRONTEND
        if self.is_backend():
            return HostOrigin.BACKEND
        return HostOrigin.EXTERNAL

    def is_contextualized(self):
        return bool(self.session.get(conf.session_contextualized_key()))

    def contextualize(self, course, register=True):
        """
        Pin `course` for the rest of the session. All future lookups answer
        with this course until decontextualize() is called.
        """
        self.session[conf.session_course_key()] = str(course.pk)
        self.session[conf.session_contextualized_key()] = True
        self._resolution = Resolution(ResolutionStatus.CONTEXTUALIZED, course)
        logger.info(f"Contextualized course {course.pk} for host {self.host!r}")

        if register:
            course.register_provider()

    def decontextualize(self):
        """Back to resolving the course from the hostname on every request."""
        self.session.pop(conf.session_course_key(), None)
        self.session.pop(conf.session_contextualized_key(), None)
        self._resolution = None

    def _resolve(self):
        if self.is_contextualized():
            pk = self.session.get(conf.session_course_key())
            try:
                course = self.store.get_course(pk) if pk else None
            except StorageNotReady as e:
                logger.warning(f"Course storage not ready while loading contextualized course: {e}")
                return Resolution.storage_not_ready()
            if course is not None:
                return Resolution(ResolutionStatus.CONTEXTUALIZED, course)
            logger.info(f"Contextualized course {pk!r} no longer exists, falling back to hostname")
            self.decontextualize()

        try:
            if not self.store.is_ready():
                return Resolution.storage_not_ready()
            course = self.store.find_course(self.normalize_host())
        except StorageNotReady as e:
            logger.warning(f"Course storage not ready: {e}")
            return Resolution.storage_not_ready()

        if course is None:
            return Resolution.unmapped()
        return Resolution(ResolutionStatus.MATCHED, course)
