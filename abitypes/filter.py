"""Topic filters for matching event logs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

HASH_LENGTH = 32


class TopicUnavailableError(IndexError):
    """Raised when indexing a topic that holds no value at that position."""

    def __init__(self) -> None:
        super().__init__("Topic unavailable")


class _TopicKind(Enum):
    ANY = "any"
    ONE_OF = "one_of"
    THIS = "this"


@dataclass(frozen=True)
class Topic:
    """Acceptable values of one log topic: any, one of several, or exactly one."""

    kind: _TopicKind = _TopicKind.ANY
    values: tuple = ()

    @classmethod
    def any(cls) -> Topic:
        return cls()

    @classmethod
    def one_of(cls, values) -> Topic:
        return cls(_TopicKind.ONE_OF, tuple(values))

    @classmethod
    def this(cls, value) -> Topic:
        return cls(_TopicKind.THIS, (value,))

    @classmethod
    def from_value(cls, value) -> Topic:
        """``None`` matches anything, a list matches any element, else that value."""
        if value is None:
            return cls.any()
        if isinstance(value, list):
            return cls.one_of(value)
        return cls.this(value)

    def map(self, func: Callable[[Any], Any]) -> Topic:
        return Topic(self.kind, tuple(func(value) for value in self.values))

    def is_any(self) -> bool:
        return self.kind is _TopicKind.ANY

    def to_list(self) -> list:
        return list(self.values)

    def __getitem__(self, index: int):
        if self.kind is _TopicKind.ANY:
            raise TopicUnavailableError()
        if self.kind is _TopicKind.THIS:
            if index != 0:
                raise TopicUnavailableError()
            return self.values[0]
        return self.values[index]

    def to_json_value(self):
        """JSON form of a topic of hashes: null, a hex string, or a list of them."""
        if self.kind is _TopicKind.ANY:
            return None
        if self.kind is _TopicKind.THIS:
            return _hash_json(self.values[0])
        return [_hash_json(value) for value in self.values]


def _hash_json(value) -> str:
    raw = bytes(value)
    if len(raw) != HASH_LENGTH:
        raise ValueError(f"hash must be {HASH_LENGTH} bytes, got {len(raw)}")
    return "0x" + raw.hex()


@dataclass(frozen=True)
class TopicFilter:
    """Filter on the four topics of a log; topic0 is usually the event signature."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)
    topic3: Topic = field(default_factory=Topic.any)

    def to_json_value(self) -> list:
        return [topic.to_json_value() for topic in (self.topic0, self.topic1, self.topic2, self.topic3)]

    def to_json(self) -> str:
        return json.dumps(self.to_json_value(), separators=(",", ":"))


@dataclass(frozen=True)
class RawTopicFilter:
    """Filter on the three indexed parameters of an event, given as tokens."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)