"""
Formula parsing and symbolic differentiation.

Thin layer over sympy: parse a formula written in everyday notation
(implicit multiplication, ``^`` for powers), differentiate it, and print
the result with sympy's canonical printer.
"""

import logging
from tokenize import TokenError
from typing import Optional, Union

import sympy as sp
from sympy.core.sympify import SympifyError
from sympy.parsing.sympy_parser import (
    parse_expr,
    standard_transformations,
    implicit_multiplication_application,
    convert_xor,
)

logger = logging.getLogger(__name__)


# Names the parser resolves to sympy objects instead of new symbols
ALLOWED_NAMES = {
    'pi': sp.pi,
    'E': sp.E,
    'sqrt': sp.sqrt,
    'sin': sp.sin,
    'cos': sp.cos,
    'tan': sp.tan,
    'asin': sp.asin,
    'acos': sp.acos,
    'atan': sp.atan,
    'sinh': sp.sinh,
    'cosh': sp.cosh,
    'tanh': sp.tanh,
    'log': sp.log,
    'ln': sp.log,
    'exp': sp.exp,
    'Abs': sp.Abs,
    'gamma': sp.gamma,
    'I': sp.I,
    'oo': sp.oo,
}

# Constructors the parser transformations emit; nothing else from sympy is visible
PARSER_GLOBALS = {
    'Symbol': sp.Symbol,
    'Integer': sp.Integer,
    'Float': sp.Float,
    'Rational': sp.Rational,
    'Function': sp.Function,
}

PARSER_NAMESPACE = {**PARSER_GLOBALS, **ALLOWED_NAMES}

TRANSFORMATIONS = standard_transformations + (implicit_multiplication_application, convert_xor)


class ParseError(ValueError):
    """Raised when a formula string is not a well-formed expression."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidSymbolError(ValueError):
    """Raised when differentiating with respect to something that is not a free variable."""


def parse(text: str) -> sp.Expr:
    """
    Parse a formula into an expression tree.

    Args:
        text: Formula such as ``"cos(x) + sin(2x)"``

    Returns:
        Parsed sympy expression

    Raises:
        ParseError: If the text is empty or not a well-formed expression
    """
    if not text or not text.strip():
        raise ParseError(text, "empty formula")

    try:
        tree = parse_expr(
            text,
            local_dict=dict(ALLOWED_NAMES),
            global_dict=dict(PARSER_GLOBALS),
            transformations=TRANSFORMATIONS,
        )
    except (SyntaxError, TokenError, SympifyError, TypeError, ValueError,
            AttributeError, NameError) as e:
        raise ParseError(text, str(e) or type(e).__name__) from e

    if not isinstance(tree, sp.Expr):
        raise ParseError(text, f"not an expression ({type(tree).__name__})")

    return tree


def make_symbol(name: Union[str, sp.Symbol]) -> sp.Symbol:
    """
    Turn a variable name into a sympy Symbol.

    Raises:
        InvalidSymbolError: If the name is not an identifier or is bound
            to a constant or function in the parser namespace
    """
    if isinstance(name, sp.Symbol):
        return name
    if not isinstance(name, str) or not name.isidentifier():
        raise InvalidSymbolError(f"Not a variable name: {name!r}")
    if name in PARSER_NAMESPACE:
        raise InvalidSymbolError(f"{name!r} is a bound name, not a variable")
    return sp.Symbol(name)


def differentiate(tree: sp.Expr, with_respect_to: Union[str, sp.Symbol]) -> sp.Expr:
    """
    Differentiate an expression tree.

    Args:
        tree: Expression to differentiate
        with_respect_to: Variable name or Symbol

    Returns:
        New expression for the derivative; the input is left untouched
    """
    symbol = make_symbol(with_respect_to)
    return sp.diff(tree, symbol)


def to_display_string(tree: sp.Expr) -> str:
    """Render an expression with sympy's canonical printer."""
    return str(tree)


class DerivativeEvaluator:
    """
    Per-frame source of a derivative's display string.

    With caching the formula is parsed and differentiated once; without
    it every call redoes the work.
    """

    def __init__(self, formula: str, symbol: str = "x", cache: bool = True):
        self.formula = formula
        self.symbol = symbol
        self.cache = cache
        self.computations = 0
        self._cached: Optional[str] = None

    def derivative(self) -> sp.Expr:
        """Parse and differentiate the formula."""
        tree = differentiate(parse(self.formula), self.symbol)
        self.computations += 1
        logger.debug(f"d/d{self.symbol} [{self.formula}] = {tree} (run {self.computations})")
        return tree

    def evaluate(self) -> str:
        """
        Get the derivative as a display string.

        Raises:
            ParseError: If the formula is malformed
            InvalidSymbolError: If the symbol is not a free variable
        """
        if self.cache and self._cached is not None:
            return self._cached

        text = to_display_string(self.derivative())
        if self.cache:
            self._cached = text
            logger.info(f"Derivative of {self.formula!r}: {text}")
        return text
