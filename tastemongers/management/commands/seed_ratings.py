"""
Management command to seed cheese ratings and their affiliate offers.

Reads a JSON fixture in the public API wire format (cheese_name, type,
affiliate_options, ...) and creates or updates ratings by name.

Usage:
    python manage.py seed_ratings                       # Seed bundled fixture
    python manage.py seed_ratings --file=ratings.json   # Seed from another file
    python manage.py seed_ratings --clear               # Clear and reseed
    python manage.py seed_ratings --dry-run             # Preview without changes
"""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from tastemongers.models import AffiliateOffer, Rating

DEFAULT_FIXTURE = Path(__file__).parent.parent.parent / "fixtures" / "ratings.json"

SCORE_FIELDS = ["overall_rating", "flavor_intensity", "complexity", "creaminess"]


class Command(BaseCommand):
    help = "Seed cheese ratings and affiliate offers from a JSON fixture"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file",
            type=str,
            default=str(DEFAULT_FIXTURE),
            help="Path to the ratings fixture (default: bundled ratings.json)",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete all existing ratings before seeding",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be seeded without making changes",
        )

    def handle(self, *args, **options):
        fixture = Path(options["file"])
        clear = options["clear"]
        dry_run = options["dry_run"]

        entries = self._load_fixture(fixture)

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN - No changes will be made"))
            for entry in entries:
                offers = entry.get("affiliate_options") or []
                self.stdout.write(f"  Would seed: {entry['cheese_name']} ({len(offers)} offers)")
            return

        with transaction.atomic():
            if clear:
                deleted, _ = Rating.objects.all().delete()
                self.stdout.write(self.style.WARNING(f"Deleted {deleted} existing records"))

            created = updated = 0
            for entry in entries:
                if self._seed_rating(entry):
                    created += 1
                else:
                    updated += 1

        self.stdout.write("")
        self.stdout.write(self.style.SUCCESS(
            f"Seeding complete! Created: {created}, Updated: {updated}"
        ))

    def _load_fixture(self, fixture):
        if not fixture.exists():
            raise CommandError(f"Ratings fixture not found: {fixture}")

        try:
            with open(fixture, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {fixture}: {e}")

        if not isinstance(data, list):
            raise CommandError(f"Expected a list of ratings in {fixture}")

        for index, entry in enumerate(data):
            missing = [
                key for key in ["cheese_name", "type", "origin", *SCORE_FIELDS]
                if key not in entry
            ]
            if missing:
                raise CommandError(f"Entry {index} is missing fields: {', '.join(missing)}")
        return data

    def _seed_rating(self, entry):
        """Create or update one rating and replace its offers. Returns True if created."""
        rating, created = Rating.objects.update_or_create(
            name=entry["cheese_name"],
            defaults={
                "category": entry["type"],
                "origin": entry["origin"],
                **{field: entry[field] for field in SCORE_FIELDS},
                "tasting_notes": entry.get("tasting_notes"),
                "pairing_suggestions": entry.get("pairing_suggestions"),
                "image_url": entry.get("image_url"),
            },
        )
        try:
            rating.full_clean()
        except ValidationError as e:
            raise CommandError(f"Invalid rating '{rating.name}': {e.message_dict}")

        rating.affiliate_offers.all().delete()
        for offer in entry.get("affiliate_options") or []:
            try:
                AffiliateOffer.objects.create(
                    rating=rating,
                    affiliate_url=offer["affiliate_url"],
                    price=Decimal(str(offer["price"])),
                    weight=Decimal(str(offer["weight"])),
                    unit=offer["unit"],
                )
            except (KeyError, InvalidOperation) as e:
                raise CommandError(f"Invalid affiliate offer for '{rating.name}': {e}")

        action = "Created" if created else "Updated"
        self.stdout.write(f"  {action}: {rating.name}")
        return created
