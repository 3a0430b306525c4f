"""
Top‑level package for the UCSB Records API.

All functionality lives in submodules under ``app``; the ASGI
application is ``ucsb_records_api.app.main:app``.
"""

__all__ = []
