import pytest

from abitypes.util import pad_u32, sanitize_name


def test_pad_u32():
    assert pad_u32(0) == bytes.fromhex("00" * 32)
    assert pad_u32(1) == bytes.fromhex("00" * 31 + "01")
    assert pad_u32(0x100) == bytes.fromhex("00" * 30 + "0100")
    assert pad_u32(0xFFFFFFFF) == bytes.fromhex("00" * 28 + "ffffffff")


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_pad_u32_out_of_range(value):
    with pytest.raises(ValueError):
        pad_u32(value)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("foo", "foo"), ("foo()", "foo"), ("()", ""), ("", ""), ("a(b)(c)", "a")],
)
def test_sanitize_name(name, expected):
    assert sanitize_name(name) == expected