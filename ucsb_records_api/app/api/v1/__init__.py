"""
Version 1 of the API.

Bundles the entity endpoints.  Breaking changes should be introduced
in a new version subpackage (e.g. ``v2``).
"""
