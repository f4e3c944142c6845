"""A registry of resources keyed by type hash and name hash, with file I/O."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TypeVar

from .base import ResourceBase
from .directory import Directory
from .resource import Destroyer, Resource

_R = TypeVar("_R", bound=ResourceBase)


def _check_type(resource_type: type) -> None:
    if not (isinstance(resource_type, type) and issubclass(resource_type, ResourceBase)):
        raise TypeError(f"{resource_type!r} is not a ResourceBase subclass")


class ResourceManager:
    """Keeps resources by type and name and reads or writes them below a base directory."""

    _instance: ResourceManager | None = None

    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        self._base_dir = Path(base_dir).absolute()
        self._resources: dict[int, dict[int, Resource]] = {}

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @classmethod
    def init(cls, argv: Sequence[str]) -> ResourceManager:
        """Create the shared manager rooted at the program's directory, once."""
        if cls._instance is None:
            if not argv:
                raise ValueError("argv must hold the program path")
            cls._instance = cls(Path(os.path.abspath(argv[0])).parent)
        return cls._instance

    @classmethod
    def instance(cls) -> ResourceManager | None:
        return cls._instance

    def add_resource(
        self, resource: ResourceBase | None, destroyer: Destroyer | None = None
    ) -> Resource | None:
        """Register ``resource``; an already registered entry wins and is returned."""
        if resource is None:
            return None
        if not isinstance(resource, ResourceBase):
            raise TypeError(f"{resource!r} is not a ResourceBase")
        by_name = self._resources.setdefault(type(resource).type_hash(), {})
        existing = by_name.get(resource.name_hash)
        if existing is not None:
            return existing
        holder = Resource()
        holder.write(resource, destroyer)
        by_name[resource.name_hash] = holder
        return holder

    def get_resource(self, resource_type: type[ResourceBase], name_hash: int) -> Resource | None:
        _check_type(resource_type)
        return self._resources.get(resource_type.type_hash(), {}).get(name_hash)

    def remove_resource(self, resource_type: type[ResourceBase], name_hash: int) -> None:
        """Forget a resource without releasing it."""
        _check_type(resource_type)
        self._resources.get(resource_type.type_hash(), {}).pop(name_hash, None)

    def free_resource(self, resource_type: type[ResourceBase], name_hash: int) -> None:
        """Release a resource and forget it."""
        _check_type(resource_type)
        holder = self._resources.get(resource_type.type_hash(), {}).pop(name_hash, None)
        if holder is not None:
            holder.release()

    def free_all_resources(self) -> None:
        for by_name in self._resources.values():
            for holder in by_name.values():
                holder.release()
            by_name.clear()
        self._resources.clear()

    def load_resources(self, resource_type: type[_R], path: str) -> list[_R]:
        """Read a JSON array of resources; a missing or empty file gives []."""
        _check_type(resource_type)
        text = self.read_text(path)
        if not text:
            return []
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a JSON array")
        return [resource_type().load_dict(item) for item in data]

    def load_resource(self, resource_type: type[_R], path: str) -> _R:
        """Read one resource; a missing or empty file gives a fresh one."""
        _check_type(resource_type)
        text = self.read_text(path)
        if text:
            return resource_type.deserialize(text)
        return resource_type()

    def save_resources(self, resources: Iterable[ResourceBase], path: str) -> None:
        data = [resource.to_dict() for resource in resources]
        self.write_text(path, json.dumps(data, separators=(",", ":"), ensure_ascii=False))

    def save_resource(self, resource: ResourceBase, path: str) -> None:
        self.write_text(path, resource.serialize())

    def scan(self, path: str) -> Directory:
        """Build the tree of directories found under ``path``."""
        root_path = self._base_dir / path
        if not root_path.is_dir():
            raise NotADirectoryError(str(root_path))
        root = Directory(str(root_path))
        pending = [(root, root_path)]
        while pending:
            node, fs_path = pending.pop()
            for entry in sorted(p for p in fs_path.iterdir() if p.is_dir()):
                pending.append((node.add_child(Directory(str(entry))), entry))
        return root

    def read_text(self, path: str) -> str:
        """Return the file's text, or an empty string when it does not exist."""
        try:
            return (self._base_dir / path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def write_text(self, path: str, text: str) -> None:
        (self._base_dir / path).write_text(text, encoding="utf-8")