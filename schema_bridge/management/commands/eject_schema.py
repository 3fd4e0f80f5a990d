import json
from django.core.management.base import BaseCommand, CommandError
from graphene_django.settings import graphene_settings

from schema_bridge.exceptions import StructureError
from schema_bridge.introspection import build_introspection_query, render_sdl, write_schema_file


class Command(BaseCommand):
    help = "Eject the local GraphQL schema to SDL or to a JSON introspection result."

    def add_arguments(self, parser):
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output the JSON introspection result instead of SDL.",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="Indentation level for JSON output (default: 2).",
        )
        parser.add_argument(
            "--depth",
            type=int,
            help="Number of ofType levels to request (default: from settings).",
        )
        parser.add_argument(
            "--include-schema-block",
            action="store_true",
            help="Prefix the SDL with a schema { query: ... } block.",
        )

    def handle(self, *args, **options):
        schema = graphene_settings.SCHEMA
        if not schema:
            raise CommandError("GRAPHENE.SCHEMA is not configured or could not be loaded.")

        try:
            query = build_introspection_query(options["depth"])
        except ValueError as e:
            raise CommandError(str(e))

        result = schema.execute(query)
        if result.errors:
            raise CommandError(f"Introspection failed: {result.errors}")

        if options["json"]:
            output = json.dumps(result.data, indent=options["indent"])
        else:
            try:
                output = render_sdl(
                    result.data, include_schema_block=options["include_schema_block"]
                )
            except StructureError as e:
                raise CommandError(str(e))

        if options["output_file"]:
            try:
                write_schema_file(output, options["output_file"])
            except OSError as e:
                raise CommandError(f"Could not write {options['output_file']}: {e}")
            self.stdout.write(self.style.SUCCESS(f"Schema written to {options['output_file']}"))
        else:
            self.stdout.write(output)
