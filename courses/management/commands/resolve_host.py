"""
Show how a hostname is classified, without a browser.

Usage:
  python manage.py resolve_host www.courses.acme.com
"""
from django.core.management.base import BaseCommand

from pathfinder.context import Pathfinder
from pathfinder.store import get_domain_store


class Command(BaseCommand):
    help = "Resolve a hostname to a course and classify it as frontend, backend or external."

    def add_arguments(self, parser):
        parser.add_argument("host", help="Hostname without port, e.g. www.courses.acme.com")

    def handle(self, *args, **options):
        finder = Pathfinder(options["host"], session={}, store=get_domain_store())
        resolution = finder.resolve()

        self.stdout.write(f"Host:       {finder.host}")
        self.stdout.write(f"Normalized: {finder.normalize_host()}")
        self.stdout.write(f"Status:     {resolution.status.value}")
        if resolution.resolved:
            self.stdout.write(f"Course:     {resolution.course} ({resolution.course.pk})")
        else:
            self.stdout.write("Course:     -")
        self.stdout.write(self.style.SUCCESS(f"Origin:     {finder.origin().value}"))
