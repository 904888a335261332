"""Tests for PathfinderMiddleware."""

from unittest.mock import patch

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import connection
from django.http import HttpResponse
from django.test import RequestFactory
from django_tenants.utils import get_public_schema_name

from courses.models import Course

from pathfinder.context import Pathfinder
from pathfinder.middleware import PathfinderMiddleware


def ok_view(request):
    return HttpResponse("ok")


@pytest.fixture
def middleware(store):
    with patch("pathfinder.context.get_domain_store", return_value=store):
        yield PathfinderMiddleware(ok_view)


def make_request(host, session=None):
    request = RequestFactory().get("/", HTTP_HOST=host)
    request.session = {} if session is None else session
    return request


class TestPathfinderMiddleware:
    def test_attaches_pathfinder(self, middleware, course_a):
        request = make_request("www.courses.acme.com:8000")

        response = middleware(request)

        assert response.status_code == 200
        assert isinstance(request.pathfinder, Pathfinder)
        assert request.pathfinder.host == "www.courses.acme.com"
        assert request.pathfinder.course() is course_a

    def test_resolution_is_lazy(self, middleware, store):
        middleware(make_request("courses.acme.com"))

        assert store.lookups == []

    def test_uses_request_session(self, middleware, course_b):
        session = {}
        request = make_request("random.biz", session=session)
        middleware(request)

        request.pathfinder.contextualize(course_b, register=False)

        assert session["pathfinder:contextualized"] is True

    def test_contextualized_session_carries_across_requests(self, middleware, course_b):
        session = {}
        first = make_request("admin.acme.com", session=session)
        middleware(first)
        first.pathfinder.contextualize(course_b, register=False)

        second = make_request("random.biz", session=session)
        middleware(second)

        assert second.pathfinder.course() is course_b

    def test_requires_session_middleware(self, middleware):
        request = RequestFactory().get("/", HTTP_HOST="courses.acme.com")

        with pytest.raises(ImproperlyConfigured):
            middleware(request)

    def test_resets_connection_to_public_schema(self, middleware):
        Course(name="Laravel", slug="laravel", schema_name="laravel").register_provider()
        assert connection.schema_name == "laravel"

        middleware(make_request("courses.acme.com"))

        assert connection.schema_name == get_public_schema_name()
