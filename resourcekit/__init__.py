"""Named, typed resources with FNV-1a hashing, an in-memory registry and JSON files."""

__version__ = "0.1.0"
__all__ = ["base", "directory", "hashing", "manager", "resource"]