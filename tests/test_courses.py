"""Tests for the course models and the resolve_host command."""

from io import StringIO
from unittest.mock import MagicMock, patch

from django.core.management import call_command

from courses.models import Course, Domain
from courses.signals import course_registered
from tests.fakes import InMemoryDomainStore


class TestCourseModel:
    def test_str(self):
        assert str(Course(name="Laravel Mastery", slug="laravel", schema_name="laravel")) == "Laravel Mastery"

    def test_domain_str(self):
        course = Course(name="Laravel Mastery", slug="laravel", schema_name="laravel")

        assert str(Domain(domain="laravel.acme.com", tenant=course)) == "laravel.acme.com"

    def test_soft_delete_keeps_schema(self):
        assert Course.auto_drop_schema is False

    def test_register_provider_activates_schema_and_signals(self):
        course = Course(name="Laravel Mastery", slug="laravel", schema_name="laravel")
        receiver = MagicMock()
        course_registered.connect(receiver, weak=False, dispatch_uid="test-register-provider")

        try:
            with patch("courses.models.connection") as connection:
                course.register_provider()
        finally:
            course_registered.disconnect(dispatch_uid="test-register-provider")

        connection.set_tenant.assert_called_once_with(course)
        receiver.assert_called_once()
        assert receiver.call_args.kwargs["course"] is course
        assert receiver.call_args.kwargs["sender"] is Course


class TestResolveHostCommand:
    def run(self, host, store):
        out = StringIO()
        with patch("courses.management.commands.resolve_host.get_domain_store", return_value=store):
            call_command("resolve_host", host, stdout=out)
        return out.getvalue()

    def test_frontend_host(self, store, course_a):
        output = self.run("www.courses.acme.com", store)

        assert "Normalized: courses.acme.com" in output
        assert "Status:     matched" in output
        assert f"Course:     Tenant A ({course_a.pk})" in output
        assert "Origin:     frontend" in output

    def test_backend_host(self, store):
        output = self.run("admin.acme.com", store)

        assert "Status:     unmapped" in output
        assert "Course:     -" in output
        assert "Origin:     backend" in output

    def test_storage_not_ready(self):
        output = self.run("courses.acme.com", InMemoryDomainStore(ready=False))

        assert "Status:     storage_not_ready" in output
        assert "Origin:     external" in output
