"""FNV-1a hashing and stable type names used to key resources."""

from __future__ import annotations

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK_64 = (1 << 64) - 1


def fnv1a(text: str | bytes) -> int:
    """Return the 64-bit FNV-1a hash of ``text`` (strings are hashed as UTF-8)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = FNV_OFFSET_BASIS
    for byte in data:
        value = ((value ^ byte) * FNV_PRIME) & _MASK_64
    return value


def type_name(cls: type) -> str:
    """Return a stable, human-readable name for ``cls``."""
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {cls!r}")
    module = cls.__module__
    if module in ("builtins", "__main__"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"