"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Restaurants and dishes each have a service (the SQL) and
a router (the HTTP routes) defined in ``api/endpoints``.
"""

from .main import app  # noqa: F401
