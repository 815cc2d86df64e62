"""Function parameters and tuple components, with their JSON ABI form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable

from abitypes.param_type import AbiError, ParamKind, ParamType, read_param_type, write_param_type


class ParamFormatError(AbiError):
    """A parameter specification in JSON ABI form is malformed."""


def inner_tuple(param: ParamType) -> tuple[ParamType, ...] | None:
    """The components of the tuple at the core of ``param``, looking through arrays.

    Returns ``None`` when ``param`` is not a tuple or an array of tuples.
    """
    while param.kind in (ParamKind.ARRAY, ParamKind.FIXED_ARRAY):
        param = param.inner
    if param.kind is ParamKind.TUPLE:
        return param.components
    return None


def _extend_inner_tuple(param: ParamType, extra: Iterable[ParamType]) -> ParamType:
    if param.kind is ParamKind.ARRAY:
        return ParamType.array(_extend_inner_tuple(param.inner, extra))
    if param.kind is ParamKind.FIXED_ARRAY:
        return ParamType.fixed_array(_extend_inner_tuple(param.inner, extra), param.size)
    return ParamType.tuple(param.components + tuple(extra))


def _read_kind(value: Any) -> ParamType:
    if not isinstance(value, str):
        raise ParamFormatError(f"type must be a string, got {value!r}")
    try:
        return read_param_type(value)
    except AbiError as error:
        raise ParamFormatError(str(error)) from error


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ParamFormatError(f"{key} must be a string, got {value!r}")
    return value


def _read_kind_with_components(data: dict) -> ParamType:
    if "type" not in data:
        raise ParamFormatError("missing field `kind`")
    kind = _read_kind(data["type"])
    components = data.get("components")
    if components is not None and not isinstance(components, list):
        raise ParamFormatError("components must be a list")
    if inner_tuple(kind) is not None:
        if components is None:
            raise ParamFormatError("missing field `components`")
        kind = _extend_inner_tuple(kind, (TupleParam.from_dict(item).kind for item in components))
    elif components is not None:
        # components of non-tuple types are still validated
        for item in components:
            TupleParam.from_dict(item)
    return kind


def _component_dict(param: ParamType) -> dict:
    result: dict[str, Any] = {"type": write_param_type(param, False)}
    components = inner_tuple(param)
    if components is not None:
        result["components"] = [_component_dict(component) for component in components]
    return result


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ParamFormatError(f"duplicate field `{key}`")
        result[key] = value
    return result


def _load_object(text: str) -> dict:
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as error:
        raise ParamFormatError(f"invalid JSON: {error}") from error
    return data


def _require_mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ParamFormatError(f"expected {what}, got {data!r}")
    return data


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data) -> Param:
        """Build a parameter from its JSON ABI object."""
        data = _require_mapping(data, "a valid event parameter spec")
        if "name" not in data:
            raise ParamFormatError("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise ParamFormatError(f"name must be a string, got {name!r}")
        internal_type = _optional_str(data, "internalType")
        kind = _read_kind_with_components(data)
        return cls(name, kind, internal_type)

    def to_dict(self) -> dict:
        result: dict[str, Any] = {}
        if self.internal_type is not None:
            result["internalType"] = self.internal_type
        result["name"] = self.name
        result.update(_component_dict(self.kind))
        return result

    @classmethod
    def from_json(cls, text) -> Param:
        return cls.from_dict(_load_object(text))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass(frozen=True)
class TupleParam:
    """A tuple component, whose name is optional."""

    name: str | None
    kind: ParamType
    internal_type: str | None = None

    @classmethod
    def from_dict(cls, data) -> TupleParam:
        """Build a tuple component from its JSON ABI object."""
        data = _require_mapping(data, "a valid tuple parameter spec")
        name = _optional_str(data, "name")
        internal_type = _optional_str(data, "internalType")
        kind = _read_kind_with_components(data)
        return cls(name, kind, internal_type)

    def to_dict(self) -> dict:
        result: dict[str, Any] = {}
        if self.internal_type is not None:
            result["internalType"] = self.internal_type
        if self.name is not None:
            result["name"] = self.name
        result.update(_component_dict(self.kind))
        return result

    @classmethod
    def from_json(cls, text) -> TupleParam:
        return cls.from_dict(_load_object(text))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))