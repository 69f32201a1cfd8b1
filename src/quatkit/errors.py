"""
Exception types raised by quatkit.

Both concrete errors subclass the matching builtin, so callers may catch
``ValueError`` or ``ArithmeticError`` without importing this module.
"""


class QuatkitError(Exception):
    """Base class for all quatkit errors."""


class InvalidArgument(QuatkitError, ValueError):
    """Argument has the wrong shape or describes an undefined rotation axis."""


class QuaternionArithmeticError(QuatkitError, ArithmeticError):
    """Operation is undefined for the operand (zero quaternion)."""
