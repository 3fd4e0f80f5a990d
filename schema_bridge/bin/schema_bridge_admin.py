#!/usr/bin/env python
import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run administrative tasks."""
    # Entry point for the 'schema-bridge' command. It mimics django-admin
    # but falls back to the bundled settings when none are configured.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "schema_bridge.conf.framework_settings")
    execute_from_command_line(sys.argv[:])


if __name__ == "__main__":
    main()
