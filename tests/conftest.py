"""Shared fixtures: an acme course platform without a database."""

import pytest
from django.db import connection

from pathfinder.context import Pathfinder
from tests.fakes import FakeCourse, InMemoryDomainStore


@pytest.fixture(autouse=True)
def pathfinder_settings(settings):
    settings.ALLOWED_HOSTS = ["*"]
    settings.PATHFINDER_MAIN_HOST = "admin.acme.com"
    settings.PATHFINDER_MAIN_HOSTS = []
    return settings


@pytest.fixture(autouse=True)
def public_schema():
    """Leave the connection on the public schema after each test."""
    yield
    connection.set_schema_to_public()


@pytest.fixture
def course_a():
    return FakeCourse("Tenant A")


@pytest.fixture
def course_b():
    return FakeCourse("Tenant B")


@pytest.fixture
def store(course_a, course_b):
    return InMemoryDomainStore(
        mappings={"courses.acme.com": course_a},
        courses=[course_b],
    )


@pytest.fixture
def session():
    return {}


@pytest.fixture
def make_pathfinder(store, session):
    """Build a Pathfinder for a host, sharing one session between calls."""

    def _make(host, store=store, session=session):
        return Pathfinder(host, session, store=store)

    return _make
