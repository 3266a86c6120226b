"""
finite_field.py

Prime-field element arithmetic for algebraic and cryptographic prototyping.

Classes:
 - FieldElement: residue in [0, order) with +, -, *, / and pow.
 - Field: represents GF(p) for a given order, provides helpers to create FieldElement.

Errors:
 - FieldElementError and its subclasses are raised by construction and can be recovered from.
 - OrderMismatchError is raised when two elements of different fields are combined.
   It is a programmer error, not bad input, and is kept out of the FieldElementError tree.

NOT CONSTANT TIME: no side-channel hardening is attempted.
The order is never tested for primality; division is only meaningful for a prime order.
"""

from typing import Optional
import logging
import random

from config import DEFAULT_CONFIG, POW_STRATEGIES

logger = logging.getLogger(__name__)


class FieldElementError(ValueError):
    """Base class for rejected constructions."""


class NegativeOrderError(FieldElementError):
    pass


class NumberGreaterThanOrderError(FieldElementError):
    pass


class OrderMismatchError(AssertionError):
    """Two elements with different orders were combined."""


def _pow_linear(number, exponent, order):
    # one multiplication per unit of exponent
    r = 1
    while exponent > 0:
        r = (r * number) % order
        exponent = exponent - 1
    return r % order


def _pow_builtin(number, exponent, order):
    # three-argument pow is only guaranteed for plain ints (numpy ints and Fraction reject it)
    if type(number) is int and type(exponent) is int and type(order) is int:
        return pow(number, exponent, order)
    return _pow_linear(number, exponent, order)


_POW_IMPLS = {
    "builtin": _pow_builtin,
    "linear": _pow_linear,
}


class FieldElement:
    """
    Represents an element of GF(order).

    The number and order may be any integer-like type supporting + - * %,
    ordering and mixing with the literals 0, 1 and -1.
    """
    __slots__ = ("_number", "_order")

    def __init__(self, number, order):
        if order < 0:
            raise NegativeOrderError(f"order must be non-negative, got {order}")
        # compared before reduction: negative numbers pass and number == order is allowed
        if number > order:
            raise NumberGreaterThanOrderError(f"number {number} is greater than order {order}")
        self._number = number % order
        self._order = order

    @classmethod
    def new(cls, number, order) -> "FieldElement":
        return cls(number, order)

    @classmethod
    def _from_residue(cls, number, order) -> "FieldElement":
        # results of arithmetic are already reduced; skip validation
        obj = cls.__new__(cls)
        obj._number = number
        obj._order = order
        return obj

    @property
    def number(self):
        return self._number

    @property
    def order(self):
        return self._order

    def __setattr__(self, name, value):
        if hasattr(self, "_order"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def _check_order(self, other: "FieldElement", op: str) -> None:
        if self._order != other._order:
            logger.error("order mismatch in %s: %s vs %s", op, self._order, other._order)
            raise OrderMismatchError(
                f"cannot {op} elements of order {self._order} and {other._order}"
            )

    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_order(other, "add")
        return self._from_residue((self._number + other._number) % self._order, self._order)

    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_order(other, "subtract")
        # + order keeps the left side non-negative for any host remainder semantics
        n = ((self._number - other._number) + self._order) % self._order
        return self._from_residue(n, self._order)

    def __mul__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_order(other, "multiply")
        return self._from_residue((self._number * other._number) % self._order, self._order)

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_order(other, "divide")
        return self * other.pow(-1)

    def __neg__(self):
        return self._from_residue((self._order - self._number) % self._order, self._order)

    def __pow__(self, exponent):
        if isinstance(exponent, FieldElement):
            return NotImplemented
        return self.pow(exponent)

    def pow(self, exponent, strategy: Optional[str] = None) -> "FieldElement":
        """
        Raise to an integer power, returning an element of the same order.

        Negative exponents are reduced modulo (order - 1) using Fermat's little
        theorem, so pow(-1) is the multiplicative inverse when order is prime.
        strategy picks "builtin" (square-and-multiply for int operands, linear
        otherwise) or "linear" (repeated multiplication); both give the same
        result. Default comes from config.
        """
        strategy = strategy or DEFAULT_CONFIG.get("pow_strategy", "builtin")
        impl = _POW_IMPLS.get(strategy)
        if impl is None:
            raise ValueError(f"unknown pow strategy {strategy!r}, expected one of {POW_STRATEGIES}")

        if exponent < 0:
            period = self._order - 1
            reduced = exponent % period if period > 0 else 0
            logger.debug("reduced exponent %s to %s (order %s)", exponent, reduced, self._order)
            exponent = reduced

        return self._from_residue(impl(self._number, exponent, self._order) % self._order, self._order)

    def inv(self) -> "FieldElement":
        """
        Multiplicative inverse via Fermat's little theorem: a^(p-2) mod p.
        Zero has no inverse and maps to zero.
        """
        return self.pow(-1)

    def is_zero(self) -> bool:
        return self._number == 0

    def to_int(self) -> int:
        return int(self._number)

    def __int__(self):
        return self.to_int()

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._number == other._number and self._order == other._order

    def __hash__(self):
        return hash((self._number, self._order))

    def __repr__(self):
        return f"FieldElement({self._number} mod {self._order})"


class Field:
    """
    Factory/namespace for elements sharing one order.
    """
    def __init__(self, order=None):
        """
        If order is None, use config default_order.
        """
        if order is None:
            order = DEFAULT_CONFIG["default_order"]
        if order < 0:
            raise NegativeOrderError(f"order must be non-negative, got {order}")
        self.order = order

    def element(self, number) -> FieldElement:
        return FieldElement(number, self.order)

    def zero(self) -> FieldElement:
        return FieldElement(0, self.order)

    def one(self) -> FieldElement:
        return FieldElement(1, self.order)

    def random_element(self, rng: Optional[random.Random] = None) -> FieldElement:
        rng = rng or random
        return FieldElement(rng.randrange(0, self.order), self.order)

    def __contains__(self, item) -> bool:
        return isinstance(item, FieldElement) and item.order == self.order

    def __repr__(self):
        return f"Field(GF({self.order}))"
