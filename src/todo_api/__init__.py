"""
FastAPI Todo API package.

Exposes the application factory so callers can do
``from todo_api import create_app``.
"""

from .main import create_app  # noqa: F401
