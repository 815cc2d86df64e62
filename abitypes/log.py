"""Raw and decoded event logs."""

from __future__ import annotations

from dataclasses import dataclass

from abitypes.token import Token

HASH_LENGTH = 32


def _hash(value) -> bytes:
    raw = bytes(value)
    if len(raw) != HASH_LENGTH:
        raise ValueError(f"topic must be {HASH_LENGTH} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class RawLog:
    """An undecoded log: indexed parameters as topics, the rest as data."""

    topics: tuple[bytes, ...]
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", tuple(_hash(topic) for topic in self.topics))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_tuple(cls, raw) -> RawLog:
        """Build a log from a ``(topics, data)`` pair."""
        topics, data = raw
        return cls(topics, data)


@dataclass(frozen=True)
class LogParam:
    """A decoded log parameter."""

    name: str
    value: Token


@dataclass(frozen=True)
class Log:
    """A decoded log."""

    params: tuple[LogParam, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))