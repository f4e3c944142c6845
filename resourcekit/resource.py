"""A holder pairing a value with the function that disposes of it."""

from __future__ import annotations

from typing import Any, Callable

Destroyer = Callable[[Any], None]


class Resource:
    """Holds a value and releases it through its destroyer exactly once."""

    def __init__(self) -> None:
        self._value: Any = None
        self._destroyer: Destroyer | None = None

    @property
    def value(self) -> Any:
        return self._value

    def write(self, value: Any, destroyer: Destroyer | None) -> None:
        """Store ``value`` together with the callable that releases it."""
        self._value = value
        self._destroyer = destroyer

    def release(self) -> None:
        """Run the destroyer on the held value, once."""
        destroyer, value = self._destroyer, self._value
        self._destroyer = None
        self._value = None
        if destroyer is not None:
            destroyer(value)

    def __enter__(self) -> Resource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()