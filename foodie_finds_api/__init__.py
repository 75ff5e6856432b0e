"""
Top‑level package for the FoodieFinds API.

This file makes ``foodie_finds_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``foodie_finds_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
