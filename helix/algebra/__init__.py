"""
Symbolic algebra for the formula overlay.
"""

from .evaluator import (
    ParseError,
    InvalidSymbolError,
    DerivativeEvaluator,
    parse,
    differentiate,
    to_display_string,
)

__all__ = [
    "ParseError",
    "InvalidSymbolError",
    "DerivativeEvaluator",
    "parse",
    "differentiate",
    "to_display_string",
]
