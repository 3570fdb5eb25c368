"""
Abstract arithmetic bases.

Each base declares the operations a number kind must provide and derives
the rest from them. Concrete classes implement the abstract methods plus
``_lift``, which converts a foreign operand (``int``, ``Fraction``) into a
number of the same family, or returns ``NotImplemented``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from keystone._contracts import contract_violation


class Addable(ABC):

    @abstractmethod
    def __add__(self, other: Any) -> Any: ...

    @abstractmethod
    def _lift(self, other: Any) -> Any: ...

    def __radd__(self, other: Any) -> Any:
        lifted = self._lift(other)
        if lifted is NotImplemented:
            return NotImplemented
        return lifted + self

    @classmethod
    def sum(cls, values: Iterable[Any]) -> Any:
        """Adds ``values`` to the additive identity, ``cls()``."""
        total = cls()
        for value in values:
            total = total + value
        return total


class Subtractable(Addable):

    @abstractmethod
    def __sub__(self, other: Any) -> Any: ...

    def __rsub__(self, other: Any) -> Any:
        lifted = self._lift(other)
        if lifted is NotImplemented:
            return NotImplemented
        return lifted - self

    def absolute_difference(self, other: Any) -> Any:
        return self - other if self >= other else self._lift(other) - self


class WholeArithmetic(Subtractable):
    """
    Multiplication and Euclidean division.

    ``//``, ``%`` and ``divmod`` follow Euclid rather than Python's floor
    convention: the remainder is never negative, whatever the divisor's sign.
    """

    @abstractmethod
    def __mul__(self, other: Any) -> Any: ...

    @abstractmethod
    def divided_according_to_euclid(self, divisor: Any) -> Any: ...

    def mod(self, divisor: Any) -> Any:
        return self - self._lift(divisor) * self.divided_according_to_euclid(divisor)

    def __floordiv__(self, divisor: Any) -> Any:
        return self.divided_according_to_euclid(divisor)

    def __mod__(self, divisor: Any) -> Any:
        return self.mod(divisor)

    def __divmod__(self, divisor: Any) -> tuple[Any, Any]:
        return self.divided_according_to_euclid(divisor), self.mod(divisor)

    def __pow__(self, exponent: Any) -> Any:
        if exponent != int(exponent) or exponent < 0:
            contract_violation(f"{type(self).__name__} exponents must be whole numbers; got {exponent}.")
        exponent = int(exponent)

        result = self._lift(1)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __abs__(self) -> Any:
        return self

    def is_divisible_by(self, divisor: Any) -> bool:
        return self.mod(divisor) == 0

    @property
    def is_even(self) -> bool:
        return self.is_divisible_by(2)

    @property
    def is_odd(self) -> bool:
        return not self.is_even

    def gcd(self, other: Any) -> Any:
        a, b = self, self._lift(other)
        while b != 0:
            a, b = b, a.mod(b)
        return a

    def lcm(self, other: Any) -> Any:
        divisor = self.gcd(other)
        if divisor == 0:
            return divisor
        return (self * other).divided_according_to_euclid(divisor)


class IntegralArithmetic(WholeArithmetic):

    @abstractmethod
    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any:
        return -self if self.is_negative else self

    @property
    def is_negative(self) -> bool:
        return self < 0

    @property
    def is_positive(self) -> bool:
        return self > 0

    def gcd(self, other: Any) -> Any:
        return abs(super().gcd(other))

    def lcm(self, other: Any) -> Any:
        return abs(super().lcm(other))


class RationalArithmetic(IntegralArithmetic):

    @abstractmethod
    def __truediv__(self, other: Any) -> Any: ...

    def reciprocal(self) -> Any:
        return self._lift(1) / self

    @property
    def is_integral(self) -> bool:
        return self.mod(1) == 0

    def rounded_down(self) -> Any:
        return self - self.mod(1)

    def rounded_up(self) -> Any:
        return -((-self).rounded_down())
