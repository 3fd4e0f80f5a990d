"""
Fetch a remote GraphQL schema by introspection and save it as SDL.

    schema-bridge fetch_schema http://localhost:4000/graphql --out schema.graphql
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from schema_bridge.client import GraphQLClient
from schema_bridge.config_proxy import get_setting
from schema_bridge.exceptions import FetchError, StructureError
from schema_bridge.introspection import fetch_schema_sdl, write_schema_file

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Fetch a GraphQL schema by introspection and write it as SDL."

    def add_arguments(self, parser):
        parser.add_argument(
            "url",
            nargs="?",
            help="GraphQL endpoint (default: introspection_settings.endpoint_url).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: introspection_settings.output_path).",
        )
        parser.add_argument(
            "--print",
            dest="print_only",
            action="store_true",
            help="Print the SDL instead of writing a file.",
        )
        parser.add_argument(
            "--depth",
            type=int,
            help="Number of ofType levels to request (default: from settings).",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            help="Request timeout in seconds (default: from settings).",
        )
        parser.add_argument(
            "--include-schema-block",
            action="store_true",
            help="Prefix the SDL with a schema { query: ... } block.",
        )

    def handle(self, *args, **options):
        url = options["url"] or get_setting("introspection_settings.endpoint_url")
        timeout = options["timeout"] or get_setting("introspection_settings.timeout_seconds")
        include_schema_block = options["include_schema_block"] or get_setting(
            "introspection_settings.include_schema_block", False
        )
        client = GraphQLClient(url, timeout=timeout)

        self.stdout.write(f"Fetching schema from {url}...")
        try:
            content = fetch_schema_sdl(
                client,
                depth=options["depth"],
                include_schema_block=include_schema_block,
            )
        except FetchError as e:
            logger.error("Fetching schema from %s failed: %s", url, e)
            raise CommandError(f"Error: {e}")
        except StructureError as e:
            logger.error("Introspection result from %s is unusable: %s", url, e)
            raise CommandError(f"Error: {e}")
        except ValueError as e:
            raise CommandError(f"Error: {e}")
        finally:
            client.close()

        if options["print_only"]:
            self.stdout.write(content)
            return

        output_file = options["output_file"] or get_setting("introspection_settings.output_path")
        try:
            write_schema_file(content, output_file)
        except OSError as e:
            logger.error("Writing schema to %s failed: %s", output_file, e)
            raise CommandError(f"Error: could not write {output_file}: {e}")
        self.stdout.write(self.style.SUCCESS(f"Schema saved to {output_file}"))
