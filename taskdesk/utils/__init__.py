"""Filesystem helpers for the JSON document store."""

from .fs import preserve_copy, write_json_atomic

__all__ = ["preserve_copy", "write_json_atomic"]
