"""Ethereum contract ABI types, tokens, signatures, topic filters, logs and function descriptions."""

__version__ = "0.1.0"

__all__ = [
    "filter",
    "function",
    "log",
    "param",
    "param_type",
    "signature",
    "state_mutability",
    "token",
    "util",
]