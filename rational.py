from __future__ import annotations
from fractions import Fraction
from typing import Union


class DivisionByZero(ZeroDivisionError):
	"""Raised when a rational or polynomial division has a zero divisor."""


RationalLike = Union["Rational", Fraction, int]


def _as_fraction(value: RationalLike) -> Fraction:
	if isinstance(value, Rational):
		return value._f
	if isinstance(value, (Fraction, int)) and not isinstance(value, bool):
		return Fraction(value)
	raise TypeError(f"cannot use {type(value).__name__} as an exact rational")


def _coerce(value: object) -> Fraction | None:
	try:
		return _as_fraction(value)
	except TypeError:
		return None


class Rational:
	__slots__ = ("_f",)
	def __init__(self, num: RationalLike = 0, den: int | None = None) -> None:
		if den is not None:
			if den == 0:
				raise DivisionByZero("zero denominator")
			self._f = Fraction(_as_fraction(num), den)
		else:
			self._f = _as_fraction(num)
	def __setattr__(self, name: str, value: object) -> None:
		if hasattr(self, "_f"):
			raise AttributeError("Rational is immutable")
		object.__setattr__(self, name, value)
	def __add__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(self._f + o)
	def __radd__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(o + self._f)
	def __sub__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(self._f - o)
	def __rsub__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(o - self._f)
	def __mul__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(self._f * o)
	def __rmul__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Rational(o * self._f)
	def __truediv__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		if o == 0:
			raise DivisionByZero("division by zero")
		return Rational(self._f / o)
	def __rtruediv__(self, other: RationalLike) -> Rational:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		if self._f == 0:
			raise DivisionByZero("division by zero")
		return Rational(o / self._f)
	def __neg__(self) -> Rational:
		return Rational(-self._f)
	def __abs__(self) -> Rational:
		return Rational(abs(self._f))
	def __pow__(self, exp: int) -> Rational:
		if exp == 0:
			return Rational(1)
		if exp < 0 and self._f == 0:
			raise DivisionByZero("zero to a negative power")
		return Rational(self._f ** exp)
	def __eq__(self, other: object) -> bool:
		if isinstance(other, Rational):
			return self._f == other._f
		if isinstance(other, (Fraction, int)):
			return self._f == other
		return NotImplemented
	def __hash__(self) -> int:
		return hash(self._f)
	def __lt__(self, other: RationalLike) -> bool:
		return self._f < _as_fraction(other)
	def __le__(self, other: RationalLike) -> bool:
		return self._f <= _as_fraction(other)
	def __gt__(self, other: RationalLike) -> bool:
		return self._f > _as_fraction(other)
	def __ge__(self, other: RationalLike) -> bool:
		return self._f >= _as_fraction(other)
	def __bool__(self) -> bool:
		return self._f != 0
	def sign(self) -> int:
		if self._f > 0:
			return 1
		if self._f < 0:
			return -1
		return 0
	def is_zero(self) -> bool:
		return self._f == 0
	def is_one(self) -> bool:
		return self._f == 1
	def is_int(self) -> bool:
		return self._f.denominator == 1
	def numerator(self) -> int:
		return self._f.numerator
	def denominator(self) -> int:
		return self._f.denominator
	def to_string(self) -> str:
		if self._f.denominator == 1:
			return str(self._f.numerator)
		return f"{self._f.numerator}/{self._f.denominator}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		if self.is_int():
			return f"Rational({self._f.numerator})"
		return f"Rational({self._f.numerator}, {self._f.denominator})"


ZERO = Rational(0)
ONE = Rational(1)
