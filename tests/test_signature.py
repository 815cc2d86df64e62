from abitypes.param_type import ParamType
from abitypes.signature import long_signature, short_signature


def test_signature():
    assert short_signature("baz", [ParamType.uint(32), ParamType.bool()]) == bytes.fromhex("cdcd77c0")


def test_allowance_signature():
    params = [ParamType.address(), ParamType.address()]
    assert short_signature("allowance", params) == bytes.fromhex("dd62ed3e")


def test_transfer_event_topic():
    params = [ParamType.address(), ParamType.address(), ParamType.uint(256)]
    assert long_signature("Transfer", params) == bytes.fromhex(
        "ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    )


def test_short_is_prefix_of_long():
    params = [ParamType.array(ParamType.tuple([ParamType.uint(256), ParamType.bytes()]))]
    long = long_signature("f", params)
    assert len(long) == 32
    assert short_signature("f", params) == long[:4]