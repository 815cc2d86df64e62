"""Whether a function reads or modifies blockchain state."""

from __future__ import annotations

from enum import Enum


class StateMutability(Enum):
    """State mutability of a contract function, valued by its ABI name."""

    PURE = "pure"
    VIEW = "view"
    NON_PAYABLE = "nonpayable"
    PAYABLE = "payable"

    @classmethod
    def default(cls) -> StateMutability:
        """Functions that do not accept Ether are the default."""
        return cls.NON_PAYABLE