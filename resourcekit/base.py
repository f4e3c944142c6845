"""Base class for named, JSON-serialisable resources."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from .hashing import fnv1a, type_name as _type_name

_R = TypeVar("_R", bound="ResourceBase")


class ResourceBase:
    """A resource with a name, a name hash and a type hash."""

    def __init__(self) -> None:
        self._name = ""
        self._name_hash = 0

    @classmethod
    def type_name(cls) -> str:
        return _type_name(cls)

    @classmethod
    def type_hash(cls) -> int:
        return fnv1a(cls.type_name())

    @property
    def name(self) -> str:
        return self._name

    @property
    def name_hash(self) -> int:
        return self._name_hash

    def initialize(self, name: str) -> None:
        """Set the resource name and its hash."""
        self._name = str(name)
        self._name_hash = fnv1a(self._name)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready fields of this resource."""
        return {"_name": self._name}

    def load_dict(self: _R, data: Mapping[str, Any]) -> _R:
        """Fill this resource from ``data`` and return it."""
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        name = data.get("_name", self._name)
        if not isinstance(name, str):
            raise TypeError("'_name' must be a string")
        self.initialize(name)
        return self

    def serialize(self) -> str:
        """Return this resource as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def deserialize(cls: type[_R], text: str) -> _R:
        """Build a new resource of this class from JSON text."""
        return cls().load_dict(json.loads(text))