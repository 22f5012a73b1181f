"""Bundled data for progress-pals."""

from .quote_loader import get_quotes_json_path, load_quotes, seed_quotes

__all__ = ["get_quotes_json_path", "load_quotes", "seed_quotes"]
