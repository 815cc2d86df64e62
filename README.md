# abitypes

Building blocks for working with the Ethereum contract ABI in Python:

- `abitypes.param_type`: parse and format Solidity type names such as
  `uint256`, `bytes32`, `address[]`, `bool[][5]` or `(uint256,bytes32)[]`.
- `abitypes.token`: typed ABI values, checked against parameter types.
- `abitypes.signature`: 4-byte function selectors and full Keccak-256
  signature hashes.
- `abitypes.param` and `abitypes.function`: read and write JSON ABI entries for
  parameters, tuple components and functions, including `components` and
  `internalType`.
- `abitypes.state_mutability`: the `pure`, `view`, `nonpayable` and `payable`
  markers.
- `abitypes.filter` and `abitypes.log`: topic filters for event logs, and raw
  or decoded logs.
- `abitypes.util`: `pad_u32` and `sanitize_name`.

## Installation

```
pip install abitypes
```

The only dependency is `pycryptodome`, used for Keccak-256.

## Parameter types

```python
from abitypes.param_type import ParamType, read_param_type, write_param_type

kind = read_param_type("(uint256,bytes32)[]")
assert kind == ParamType.array(ParamType.tuple([ParamType.uint(256), ParamType.fixed_bytes(32)]))
assert str(kind) == "(uint256,bytes32)[]"
assert write_param_type(kind, False) == "tuple[]"
assert kind.is_dynamic()
```

`ParamType` is a frozen dataclass with a `kind` (a `ParamKind`), a `size` for
integer widths and fixed lengths, an `inner` element type for arrays and
`components` for tuples. It is built with the class methods `address()`,
`bytes()`, `int(size)`, `uint(size)`, `bool()`, `string()`, `array(inner)`,
`fixed_bytes(size)`, `fixed_array(inner, size)` and `tuple(components)`.
`is_empty_bytes_valid_encoding()` is true only for zero-length fixed bytes and
fixed arrays.

Bare `int` and `uint` read as 256 bits, and `tuple` as an empty tuple. A name
that is not a known type reads as `uint8`, which is how Solidity enums appear
in library ABIs. A malformed tuple name raises `InvalidNameError`; a size that
is not a number raises `AbiError`, of which `InvalidNameError` is a subclass.

## Tokens

```python
from abitypes.param_type import ParamType
from abitypes.token import Token, TokenKind, types_check

tokens = [Token.uint(69), Token.bool(True)]
assert types_check(tokens, [ParamType.uint(32), ParamType.bool()])
assert Token.int(-1).value == 2**256 - 1
assert Token.uint(69).value_if(TokenKind.BOOL) is None
assert str(Token.array([Token.bool(True), Token.uint(255)])) == "[true,ff]"
```

Addresses take 20 bytes or 40 hex digits, optionally prefixed with `0x`.
Integers are held as non-negative values within 256 bits, signed ones in two's
complement; values out of range raise `ValueError`. Integer tokens match any
width of their signedness, and fixed bytes match any fixed-bytes type at least
as long as the value.

## Signatures

```python
from abitypes.param_type import ParamType
from abitypes.signature import short_signature, long_signature

selector = short_signature("baz", [ParamType.uint(32), ParamType.bool()])
assert selector.hex() == "cdcd77c0"
digest = long_signature("baz", [ParamType.uint(32), ParamType.bool()])
assert len(digest) == 32
```

## JSON ABI entries

```python
from abitypes.param import Param, TupleParam
from abitypes.function import Function

param = Param.from_json('{"name": "foo", "type": "tuple[]", "components": [{"type": "address"}]}')
print(param.to_json())  # {"name":"foo","type":"tuple[]","components":[{"type":"address"}]}

function = Function.from_dict({
    "name": "baz",
    "inputs": [{"name": "a", "type": "uint32"}, {"name": "b", "type": "bool"}],
    "outputs": [],
    "stateMutability": "payable",
})
assert function.short_signature().hex() == "cdcd77c0"
assert function.signature() == "baz(uint32,bool)"
```

`Param` requires a `name`; `TupleParam` leaves it optional. Types that are
tuples, or arrays of tuples, need a `components` list. Missing fields,
duplicate keys, wrong value types and unknown state mutabilities raise
`ParamFormatError`. `inner_tuple(kind)` returns the components of the tuple
at the core of a type, looking through arrays.

`Function.from_dict` needs `name`, `inputs` and `outputs`, takes `constant` and
`stateMutability` when present (defaulting to `nonpayable`), and trims names
such as `foo()` to `foo`. `Function.signature()` adds the outputs, as in
`name(bool):(uint256,string)`, when there are any.

## Topic filters and logs

```python
from abitypes.filter import Topic, TopicFilter
from abitypes.log import RawLog

topic = Topic.one_of([10, 20])
assert topic[1] == 20
assert Topic.from_value(None).is_any()
assert Topic.this(10).to_list() == [10]
assert Topic.this(2).map(lambda v: v * 5) == Topic.this(10)

signature_hash = bytes(32)
topic_filter = TopicFilter(topic0=Topic.this(signature_hash))
assert topic_filter.to_json().endswith(",null,null,null]")

log = RawLog.from_tuple(([signature_hash], b"\x01"))
```

`TopicFilter.to_json()` writes the four topics as a JSON list of `0x`-prefixed
hex hashes, with `null` where any value matches; hashes must be 32 bytes.
Indexing a topic that holds no value at that position raises
`TopicUnavailableError`. `RawTopicFilter` holds three topics of tokens. `Log`
and `LogParam` hold decoded logs.

## What the package does not do

The package describes ABI types and values but does not encode tokens into
ABI call data or decode call data or log data back into tokens. It does not
read whole contract ABI files with events, constructors and errors, and it
does not parse tokens from text. `Function` gives selectors and signatures,
but has no methods to encode inputs or decode outputs.

## Running the tests

```
pip install -e ".[test]"
pytest
```