"""
HTTP routes, grouped by API version.

Each version subpackage exposes a ``router`` that ``create_app``
mounts under ``settings.api_prefix``.
"""
