"""
Export the configured mongoql ``Api``.

    python manage.py export_mongoql_schema
    python manage.py export_mongoql_schema --format json -o schema.json
    python manage.py export_mongoql_schema --operations
"""

import json
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from mongoql.core.exceptions import ModelDefinitionError
from mongoql.core.operations import RootKind
from mongoql.urls import get_configured_api


class Command(BaseCommand):
    help = (
        "Print the GraphQL schema generated from the mongoql models in "
        "MONGOQL['schema'], or list its generated operations."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--schema",
            dest="schema_path",
            help="Dotted path to a mongoql Api, overriding MONGOQL['schema'].",
        )
        parser.add_argument(
            "--format",
            choices=["sdl", "json"],
            default="sdl",
            help="sdl for type definitions, json for an introspection result.",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation when --format json is used.",
        )
        parser.add_argument(
            "--operations",
            action="store_true",
            help="List the query and mutation names served by the Api instead.",
        )
        parser.add_argument("-o", "--output", help="Write to this file instead of stdout.")

    def handle(self, *args, **options):
        try:
            api = get_configured_api(options["schema_path"])
        except (ImproperlyConfigured, ModelDefinitionError) as exc:
            raise CommandError(str(exc)) from exc

        if options["operations"]:
            output = self._operation_listing(api)
        elif options["format"] == "json":
            output = json.dumps(api.introspect(), indent=options["indent"])
        else:
            output = api.print_sdl()

        if not options["output"]:
            self.stdout.write(output)
            return

        Path(options["output"]).write_text(output + "\n", encoding="utf-8")
        self.stdout.write(
            self.style.SUCCESS(
                f"Wrote {len(api.query)} queries and {len(api.mutation)} mutations "
                f"to {options['output']}"
            )
        )

    @staticmethod
    def _operation_listing(api) -> str:
        lines = []
        for kind in RootKind:
            descriptors = api.query if kind is RootKind.QUERY else api.mutation
            for name, descriptor in descriptors.items():
                lines.append(f"{kind.value:<9}{name:<24}{descriptor.type_name or name}")
        return "\n".join(lines)
