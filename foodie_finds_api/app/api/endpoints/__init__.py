"""Routers for the ``restaurants`` and ``dishes`` tables."""
