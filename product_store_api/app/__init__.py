"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, errors, authentication and the
in‑memory product store), ``schemas`` (Pydantic wire models),
``services`` (business logic) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
