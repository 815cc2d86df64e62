"""Small helpers shared across the package."""

from __future__ import annotations

_U32_MAX = 0xFFFFFFFF


def pad_u32(value: int) -> bytes:
    """Return ``value`` as a right-aligned, zero-padded 32-byte word."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value out of range for u32: {value}")
    return value.to_bytes(32, "big")


def sanitize_name(name: str) -> str:
    """Drop everything from the first ``(`` on, as some ABIs put signatures in names."""
    return name.split("(", 1)[0]