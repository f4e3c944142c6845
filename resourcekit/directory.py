"""A simple directory tree node."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class Directory:
    """A directory with a parent link and ordered children."""

    path: str
    parent: Directory | None = field(default=None, repr=False)
    children: list[Directory] = field(default_factory=list, repr=False)

    @property
    def fs_path(self) -> Path:
        return Path(self.path)

    def child(self, index: int) -> Directory | None:
        """Return the child at ``index``, or None when it is out of range."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def add_child(self, child: Directory) -> Directory:
        """Append ``child`` and make this directory its parent."""
        if child is self:
            raise ValueError("a directory cannot be its own child")
        child.parent = self
        self.children.append(child)
        return child