"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors), ``api`` (JSON
routes under ``/api``), ``schemas`` (request and response models) and
``services`` (validation and the in‑memory listing store).
"""

from .main import app, create_app  # noqa: F401
