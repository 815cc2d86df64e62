"""Keccak-256 signatures of functions and events."""

from __future__ import annotations

from typing import Iterable

from Crypto.Hash import keccak

from abitypes.param_type import ParamType, write_param_type


def _signature_hash(name: str, params: Iterable[ParamType]) -> bytes:
    types = ",".join(write_param_type(param) for param in params)
    digest = keccak.new(digest_bits=256)
    digest.update(f"{name}({types})".encode())
    return digest.digest()


def short_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The first four bytes of the Keccak-256 hash of the signature."""
    return _signature_hash(name, params)[:4]


def long_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The full 32-byte Keccak-256 hash of the signature."""
    return _signature_hash(name, params)