"""Naming helpers for generated identifiers."""

from .lib import to_camel_case

__all__ = ["to_camel_case"]
