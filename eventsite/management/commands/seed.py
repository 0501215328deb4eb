"""
Django management command for populating the database with demo data.

This command runs automatically on container startup if RUN_SEEDS=true.
You can also run it manually: python manage.py seed
"""

from django.core.management.base import BaseCommand, CommandError

from eventsite.seeding.base import run_seed


class Command(BaseCommand):
    """Management command to seed the database."""

    help = "Load demo events and content documents"

    def add_arguments(self, parser):
        parser.add_argument(
            "--append",
            action="store_true",
            help="Keep existing data instead of purging it first",
        )
        parser.add_argument(
            "--no-initialize",
            action="store_true",
            help="Do not create the webspace home document",
        )
        parser.add_argument(
            "--fixture",
            action="append",
            dest="fixtures",
            metavar="NAME",
            help="Only load the named fixture class (repeatable)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed for reproducible fake content",
        )

    def handle(self, *args, **options):
        """Run seed operations."""
        self.stdout.write("Running seed command...")

        try:
            stats = run_seed(
                names=options["fixtures"],
                append=options["append"],
                initialize=not options["no_initialize"],
                seed=options["seed"],
            )
        except Exception as e:
            raise CommandError(f"Seeding failed: {e}") from e

        self.stdout.write(
            f"Loaded {stats['fixtures_loaded']} fixture(s): "
            f"{stats['events']} event(s), {stats['documents']} document(s)"
        )
        self.stdout.write(self.style.SUCCESS("Seed command completed."))
