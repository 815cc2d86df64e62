import pytest

from abitypes.function import Function
from abitypes.param import Param, ParamFormatError
from abitypes.param_type import ParamType
from abitypes.state_mutability import StateMutability


def _baz() -> Function:
    return Function(
        name="baz",
        inputs=[
            Param("a", ParamType.uint(32)),
            Param("b", ParamType.bool()),
        ],
        outputs=[],
        constant=None,
        state_mutability=StateMutability.PAYABLE,
    )


def test_short_signature():
    assert _baz().short_signature() == bytes.fromhex("cdcd77c0")


def test_signature_without_outputs():
    assert _baz().signature() == "baz(uint32,bool)"


def test_signature_with_outputs():
    func = Function(
        name="functionName",
        inputs=[Param("a", ParamType.bool())],
        outputs=[Param("x", ParamType.uint(256)), Param("y", ParamType.string())],
    )
    assert func.signature() == "functionName(bool):(uint256,string)"


def test_signature_no_inputs():
    func = Function(name="functionName", outputs=[Param("", ParamType.uint(256))])
    assert func.signature() == "functionName():(uint256)"
    assert Function(name="functionName").signature() == "functionName()"


def test_from_dict_operation_example():
    data = {
        "type": "function",
        "inputs": [{"name": "a", "type": "address"}],
        "name": "foo",
        "outputs": [],
    }
    expected = Function(
        name="foo",
        inputs=[Param("a", ParamType.address())],
        outputs=[],
        constant=None,
        state_mutability=StateMutability.NON_PAYABLE,
    )
    assert Function.from_dict(data) == expected


def test_round_trip():
    func = _baz()
    assert Function.from_dict(func.to_dict()) == func


def test_to_dict_layout():
    data = _baz().to_dict()
    assert data["stateMutability"] == "payable"
    assert "constant" not in data
    assert data["inputs"][0] == {"name": "a", "type": "uint32"}


def test_constant_kept():
    func = Function(name="c", constant=True)
    assert func.to_dict()["constant"] is True
    assert Function.from_dict(func.to_dict()).constant is True


@pytest.mark.parametrize(
    "name, expected",
    [("foo", "foo"), ("foo()", "foo"), ("()", ""), ("", "")],
)
def test_sanitize_function_name(name, expected):
    data = {
        "type": "function",
        "inputs": [{"name": "a", "type": "address"}],
        "name": name,
        "outputs": [],
    }
    func = Function.from_dict(data)
    assert func.name == expected
    assert Function.from_dict(func.to_dict()) == func


def test_missing_inputs_rejected():
    with pytest.raises(ParamFormatError):
        Function.from_dict({"name": "foo", "outputs": []})


def test_missing_name_rejected():
    with pytest.raises(ParamFormatError):
        Function.from_dict({"inputs": [], "outputs": []})


def test_unknown_state_mutability_rejected():
    with pytest.raises(ParamFormatError):
        Function.from_dict({"name": "f", "inputs": [], "outputs": [], "stateMutability": "odd"})