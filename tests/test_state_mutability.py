import json

import pytest

from abitypes.state_mutability import StateMutability


def test_state_mutability():
    text = '["pure", "view", "nonpayable", "payable"]'
    parsed = [StateMutability(name) for name in json.loads(text)]
    assert parsed == [
        StateMutability.PURE,
        StateMutability.VIEW,
        StateMutability.NON_PAYABLE,
        StateMutability.PAYABLE,
    ]
    assert json.loads(json.dumps([m.value for m in parsed])) == json.loads(text)


def test_default():
    assert StateMutability.default() is StateMutability.NON_PAYABLE


def test_unknown_name():
    with pytest.raises(ValueError):
        StateMutability("constant")