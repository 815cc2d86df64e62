"""Function and event parameter types, with their canonical text form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_DIGITS = re.compile(r"\+?[0-9]+")


class AbiError(ValueError):
    """Base error for malformed ABI data or type names."""


class InvalidNameError(AbiError):
    """A type name could not be parsed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid type name: {name!r}")
        self.name = name


class ParamKind(Enum):
    """The kinds of ABI parameter types."""

    ADDRESS = "address"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    ARRAY = "array"
    FIXED_BYTES = "fixed_bytes"
    FIXED_ARRAY = "fixed_array"
    TUPLE = "tuple"


@dataclass(frozen=True)
class ParamType:
    """An ABI parameter type.

    ``size`` holds the bit width of integers, the length of fixed bytes and
    the length of fixed arrays; ``inner`` the element type of arrays;
    ``components`` the member types of tuples.
    """

    kind: ParamKind
    size: int | None = None
    inner: ParamType | None = None
    components: tuple[ParamType, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    @classmethod
    def address(cls) -> ParamType:
        return cls(ParamKind.ADDRESS)

    @classmethod
    def bytes(cls) -> ParamType:
        return cls(ParamKind.BYTES)

    @classmethod
    def int(cls, size) -> ParamType:
        return cls(ParamKind.INT, size=size)

    @classmethod
    def uint(cls, size) -> ParamType:
        return cls(ParamKind.UINT, size=size)

    @classmethod
    def bool(cls) -> ParamType:
        return cls(ParamKind.BOOL)

    @classmethod
    def string(cls) -> ParamType:
        return cls(ParamKind.STRING)

    @classmethod
    def array(cls, inner) -> ParamType:
        return cls(ParamKind.ARRAY, inner=inner)

    @classmethod
    def fixed_bytes(cls, size) -> ParamType:
        return cls(ParamKind.FIXED_BYTES, size=size)

    @classmethod
    def fixed_array(cls, inner, size) -> ParamType:
        return cls(ParamKind.FIXED_ARRAY, size=size, inner=inner)

    @classmethod
    def tuple(cls, components) -> ParamType:
        return cls(ParamKind.TUPLE, components=tuple(components))

    def is_dynamic(self) -> bool:
        """Whether values of this type are encoded with an offset prefix."""
        if self.kind in (ParamKind.BYTES, ParamKind.STRING, ParamKind.ARRAY):
            return True
        if self.kind is ParamKind.FIXED_ARRAY:
            return self.inner.is_dynamic()
        if self.kind is ParamKind.TUPLE:
            return any(component.is_dynamic() for component in self.components)
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether an empty byte string is a valid encoding of this type."""
        if self.kind in (ParamKind.FIXED_BYTES, ParamKind.FIXED_ARRAY):
            return self.size == 0
        return False

    def __str__(self) -> str:
        return write_param_type(self)


def _parse_size(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise AbiError(f"invalid integer: {text!r}")
    return int(text)


def _read_tuple(name: str) -> ParamType:
    subtypes: list[ParamType] = []
    subtuples: list[list[ParamType]] = []
    nested = 0
    top_level_paren_open = 0
    last_item = 1
    pos = 0
    length = len(name)

    while pos < length:
        char = name[pos]
        if char == "(":
            top_level_paren_open = pos
            nested += 1
            if nested > 1:
                subtuples.append([])
                last_item = pos + 1
        elif char == ")":
            nested -= 1
            if nested < 0:
                raise InvalidNameError(name)
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 0:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            else:
                # take trailing array brackets along with the nested tuple
                while pos + 1 < length and name[pos + 1] not in ",)":
                    pos += 1
                subtype = read_param_type(name[top_level_paren_open : pos + 1])
                if nested > 1:
                    try:
                        subtuple = subtuples[nested - 2]
                    except IndexError:
                        raise InvalidNameError(name) from None
                    subtuples[nested - 2] = []
                    subtuple.append(subtype)
                    subtypes.append(ParamType.tuple(subtuple))
                else:
                    subtypes.append(subtype)
                last_item = pos + 1
        elif char == ",":
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 1:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            elif nested > 1:
                try:
                    target = subtuples[nested - 2]
                except IndexError:
                    raise InvalidNameError(name) from None
                target.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
        pos += 1

    return ParamType.tuple(subtypes)


def read_param_type(name: str) -> ParamType:
    """Parse a type name such as ``uint256[]`` or ``(address,bool)``."""
    if name.endswith(")"):
        if not name.startswith("("):
            raise InvalidNameError(name)
        return _read_tuple(name)

    if name.endswith("]"):
        open_pos = name.rfind("[")
        if open_pos < 0:
            raise InvalidNameError(name)
        num = name[open_pos + 1 : -1]
        if not num:
            return ParamType.array(read_param_type(name[:open_pos]))
        size = _parse_size(num)
        return ParamType.fixed_array(read_param_type(name[:open_pos]), size)

    simple = {
        "address": ParamType.address,
        "bytes": ParamType.bytes,
        "bool": ParamType.bool,
        "string": ParamType.string,
    }
    if name in simple:
        return simple[name]()
    if name == "int":
        return ParamType.int(256)
    if name == "uint":
        return ParamType.uint(256)
    if name == "tuple":
        return ParamType.tuple([])
    if name.startswith("int"):
        return ParamType.int(_parse_size(name[3:]))
    if name.startswith("uint"):
        return ParamType.uint(_parse_size(name[4:]))
    if name.startswith("bytes"):
        return ParamType.fixed_bytes(_parse_size(name[5:]))
    # Any other name is a Solidity enum, which the ABI encodes as uint8.
    return ParamType.uint(8)


def write_param_type(param: ParamType, serialize_tuple_contents: bool = True) -> str:
    """Format a type as text.

    With ``serialize_tuple_contents`` tuples are written as their member
    types in parentheses, otherwise as the keyword ``tuple``.
    """
    kind = param.kind
    if kind is ParamKind.FIXED_BYTES:
        return f"bytes{param.size}"
    if kind is ParamKind.INT:
        return f"int{param.size}"
    if kind is ParamKind.UINT:
        return f"uint{param.size}"
    if kind is ParamKind.FIXED_ARRAY:
        return f"{write_param_type(param.inner, serialize_tuple_contents)}[{param.size}]"
    if kind is ParamKind.ARRAY:
        return f"{write_param_type(param.inner, serialize_tuple_contents)}[]"
    if kind is ParamKind.TUPLE:
        if not serialize_tuple_contents:
            return "tuple"
        inner = ",".join(
            write_param_type(component, serialize_tuple_contents)
            for component in param.components
        )
        return f"({inner})"
    return kind.value