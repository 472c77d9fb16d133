"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The in‑memory entity store and the simulated gateway live
in ``services``; request and response models live in ``schemas``; HTTP
routes are grouped under ``api/<version>/``.
"""

from .main import app  # noqa: F401
