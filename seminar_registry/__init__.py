"""
Top‑level package for the Seminar Registry service.

This file makes ``seminar_registry`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``seminar_registry.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
