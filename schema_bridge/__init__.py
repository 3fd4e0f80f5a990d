"""
schema-bridge: typed GraphQL client behind a REST facade, plus an
introspection-to-SDL renderer.
"""

from .defaults import LIBRARY_VERSION as __version__
