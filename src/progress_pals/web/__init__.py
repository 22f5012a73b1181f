"""Web interface for progress-pals."""

from .app import create_app

__all__ = ["create_app"]
