"""Contract function specifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from abitypes.param import Param, ParamFormatError
from abitypes.param_type import ParamType, write_param_type
from abitypes.signature import short_signature as _short_signature
from abitypes.state_mutability import StateMutability
from abitypes.util import sanitize_name


def _params_from(data: dict, key: str) -> tuple[Param, ...]:
    if key not in data:
        raise ParamFormatError(f"missing field `{key}`")
    items = data[key]
    if not isinstance(items, list):
        raise ParamFormatError(f"{key} must be a list, got {items!r}")
    return tuple(Param.from_dict(item) for item in items)


def _state_mutability_from(value: Any) -> StateMutability:
    try:
        return StateMutability(value)
    except ValueError:
        raise ParamFormatError(f"unknown state mutability: {value!r}") from None


@dataclass(frozen=True)
class Function:
    """A contract function: its name, inputs, outputs and state mutability.

    ``constant`` is the pre-0.5.0 Solidity flag, kept only when present.
    """

    name: str
    inputs: tuple[Param, ...] = ()
    outputs: tuple[Param, ...] = ()
    constant: bool | None = None
    state_mutability: StateMutability = field(default_factory=StateMutability.default)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def _input_types(self) -> list[ParamType]:
        return [param.kind for param in self.inputs]

    def short_signature(self) -> bytes:
        """The 4-byte selector of this function."""
        return _short_signature(self.name, self._input_types())

    def signature(self) -> str:
        """A text signature such as ``name(bool):(uint256,string)``.

        The output part is left out when the function has no outputs.
        """
        inputs = ",".join(write_param_type(param.kind) for param in self.inputs)
        if not self.outputs:
            return f"{self.name}({inputs})"
        outputs = ",".join(write_param_type(param.kind) for param in self.outputs)
        return f"{self.name}({inputs}):({outputs})"

    @classmethod
    def from_dict(cls, data) -> Function:
        """Build a function from its JSON ABI object; other keys are ignored."""
        if not isinstance(data, dict):
            raise ParamFormatError(f"expected a function spec, got {data!r}")
        if "name" not in data:
            raise ParamFormatError("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise ParamFormatError(f"name must be a string, got {name!r}")
        inputs = _params_from(data, "inputs")
        outputs = _params_from(data, "outputs")
        constant = data.get("constant")
        if constant is not None and not isinstance(constant, bool):
            raise ParamFormatError(f"constant must be a boolean, got {constant!r}")
        if "stateMutability" in data:
            mutability = _state_mutability_from(data["stateMutability"])
        else:
            mutability = StateMutability.default()
        return cls(sanitize_name(name), inputs, outputs, constant, mutability)

    def to_dict(self) -> dict:
        result: dict[str, Any] = {
            "name": self.name,
            "inputs": [param.to_dict() for param in self.inputs],
            "outputs": [param.to_dict() for param in self.outputs],
        }
        if self.constant is not None:
            result["constant"] = self.constant
        result["stateMutability"] = self.state_mutability.value
        return result