"""Decoded ABI values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from abitypes.param_type import ParamKind, ParamType

ADDRESS_LENGTH = 20
WORD_BITS = 256
_WORD_MASK = (1 << WORD_BITS) - 1
_INT_MIN = -(1 << (WORD_BITS - 1))


class TokenKind(Enum):
    """The kinds of ABI values."""

    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    FIXED_ARRAY = "fixed_array"
    ARRAY = "array"
    TUPLE = "tuple"


def _to_bytes(value: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(value, str):
        text = value[2:] if value.startswith("0x") else value
        return bytes.fromhex(text)
    return bytes(value)


@dataclass(frozen=True)
class Token:
    """An ABI value.

    Addresses and byte strings are held as ``bytes``, integers as
    non-negative ``int`` within 256 bits (signed values in two's complement),
    and arrays and tuples as tuples of tokens.
    """

    kind: TokenKind
    value: object

    @classmethod
    def address(cls, value) -> Token:
        """An address from 20 bytes or 40 hex digits (optionally ``0x``-prefixed)."""
        raw = _to_bytes(value)
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"address must be {ADDRESS_LENGTH} bytes, got {len(raw)}")
        return cls(TokenKind.ADDRESS, raw)

    @classmethod
    def fixed_bytes(cls, value) -> Token:
        return cls(TokenKind.FIXED_BYTES, _to_bytes(value))

    @classmethod
    def bytes(cls, value) -> Token:
        return cls(TokenKind.BYTES, _to_bytes(value))

    @classmethod
    def int(cls, value) -> Token:
        """A signed integer; negative values are stored in two's complement."""
        if not _INT_MIN <= value <= _WORD_MASK:
            raise ValueError(f"value out of range for a 256-bit integer: {value}")
        return cls(TokenKind.INT, value & _WORD_MASK)

    @classmethod
    def uint(cls, value) -> Token:
        if not 0 <= value <= _WORD_MASK:
            raise ValueError(f"value out of range for uint256: {value}")
        return cls(TokenKind.UINT, value)

    @classmethod
    def bool(cls, value) -> Token:
        return cls(TokenKind.BOOL, bool(value))

    @classmethod
    def string(cls, value) -> Token:
        return cls(TokenKind.STRING, str(value))

    @classmethod
    def fixed_array(cls, items) -> Token:
        return cls(TokenKind.FIXED_ARRAY, tuple(items))

    @classmethod
    def array(cls, items) -> Token:
        return cls(TokenKind.ARRAY, tuple(items))

    @classmethod
    def tuple(cls, items) -> Token:
        return cls(TokenKind.TUPLE, tuple(items))

    def type_check(self, param_type: ParamType) -> bool:
        """Whether this value fits ``param_type``.

        Integers match any width of their signedness; fixed bytes match any
        fixed-bytes type at least as long as the value.
        """
        kind = self.kind
        if kind is TokenKind.ADDRESS:
            return param_type == ParamType.address()
        if kind is TokenKind.BYTES:
            return param_type == ParamType.bytes()
        if kind is TokenKind.INT:
            return param_type.kind is ParamKind.INT
        if kind is TokenKind.UINT:
            return param_type.kind is ParamKind.UINT
        if kind is TokenKind.BOOL:
            return param_type == ParamType.bool()
        if kind is TokenKind.STRING:
            return param_type == ParamType.string()
        if kind is TokenKind.FIXED_BYTES:
            return param_type.kind is ParamKind.FIXED_BYTES and param_type.size >= len(self.value)
        if kind is TokenKind.ARRAY:
            return param_type.kind is ParamKind.ARRAY and all(
                item.type_check(param_type.inner) for item in self.value
            )
        if kind is TokenKind.FIXED_ARRAY:
            return (
                param_type.kind is ParamKind.FIXED_ARRAY
                and param_type.size == len(self.value)
                and all(item.type_check(param_type.inner) for item in self.value)
            )
        # tuple
        if param_type.kind is not ParamKind.TUPLE:
            return False
        if len(self.value) > len(param_type.components):
            return False
        return all(
            item.type_check(component)
            for item, component in zip(self.value, param_type.components)
        )

    def is_dynamic(self) -> bool:
        """Whether this value is encoded with an offset prefix."""
        if self.kind in (TokenKind.BYTES, TokenKind.STRING, TokenKind.ARRAY):
            return True
        if self.kind in (TokenKind.FIXED_ARRAY, TokenKind.TUPLE):
            return any(item.is_dynamic() for item in self.value)
        return False

    def value_if(self, kind: TokenKind):
        """Return the held value if this token is of ``kind``, else ``None``."""
        return self.value if self.kind is kind else None

    def __str__(self) -> str:
        kind = self.kind
        if kind is TokenKind.BOOL:
            return "true" if self.value else "false"
        if kind is TokenKind.STRING:
            return self.value
        if kind in (TokenKind.ADDRESS, TokenKind.BYTES, TokenKind.FIXED_BYTES):
            return self.value.hex()
        if kind in (TokenKind.INT, TokenKind.UINT):
            return format(self.value, "x")
        inner = ",".join(str(item) for item in self.value)
        if kind is TokenKind.TUPLE:
            return f"({inner})"
        return f"[{inner}]"


def types_check(tokens: Sequence[Token], param_types: Sequence[ParamType]) -> bool:
    """Whether every token matches the parameter type at the same position."""
    tokens = list(tokens)
    param_types = list(param_types)
    return len(tokens) == len(param_types) and all(
        token.type_check(param_type) for token, param_type in zip(tokens, param_types)
    )


def _flatten(tokens: Iterable[Token]) -> list[Token]:
    return list(tokens)