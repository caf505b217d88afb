"""Catalog writers."""

from .json import write_catalog, write_json

__all__ = ["write_catalog", "write_json"]
