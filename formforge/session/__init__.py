"""Form session - create, update, delete, reorder and select fields."""

from .lib import FormSession, build_component

__all__ = ["FormSession", "build_component"]
