"""Import a questionnaire (questions and options) from a JSON file."""

from __future__ import annotations

import json

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from core.service.questionnaire_import import import_questionnaire


class Command(BaseCommand):
    help = "Import a questionnaire with its questions and options from a JSON file."

    def add_arguments(self, parser) -> None:
        parser.add_argument("path", help="Path to the questionnaire JSON file.")
        parser.add_argument(
            "--database",
            default="default",
            help="Database alias to import into.",
        )

    def handle(self, *args, **options) -> None:
        path = options["path"]
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"Invalid JSON in {path}: {exc}") from exc

        try:
            questionnaire = import_questionnaire(payload, using=options["database"])
        except ValidationError as exc:
            raise CommandError("; ".join(exc.messages)) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"Imported questionnaire #{questionnaire.id} "
                f"({questionnaire.questions.count()} question(s))."
            )
        )
