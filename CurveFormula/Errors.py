"""
Error types raised by the conversion engine.

Hierarchy
---------
FormulaError
 ├─ InvalidArgument : a formula was called with arguments outside its domain
 └─ RangeViolation  : a value left the envelope of the fixed-point engine
     ├─ Overflow    : a checked add/mul exceeded the 256-bit register
     └─ Underflow   : a checked sub went below zero

None of these are recoverable inside the engine; each one aborts the whole call.
"""


class FormulaError(Exception):
    """Base class for every failure raised by the engine."""


class InvalidArgument(FormulaError, ValueError):
    """Supply, balance, ratio or amount rejected at the formula entry."""


class RangeViolation(FormulaError, ArithmeticError):
    """An operand is outside the range the fixed-point engine can represent."""


class Overflow(RangeViolation):
    pass


class Underflow(RangeViolation):
    pass
