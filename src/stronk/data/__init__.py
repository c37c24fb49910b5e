"""Bundled data and loaders."""

from .routine_loader import get_default_routine_path, load_routine, validate_routine

__all__ = ["get_default_routine_path", "load_routine", "validate_routine"]
