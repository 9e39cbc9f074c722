from __future__ import annotations
from typing import List, Tuple
from dataclasses import dataclass, field
from fractions import Fraction
from rational import Rational, RationalLike, ZERO, ONE


def _is_scalar(value: object) -> bool:
    return isinstance(value, (Rational, Fraction, int)) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Polynomial:
    """Dense univariate polynomial over the rationals.

    ``coeffs[i]`` is the coefficient of x^i. The stored tuple always holds at
    least one entry; trailing zeros are allowed and ignored by every
    operation that depends on the degree.
    """

    coeffs: Tuple[Rational, ...] = field(default_factory=lambda: (ZERO,))

    def __post_init__(self):
        cs = tuple(c if isinstance(c, Rational) else Rational(c) for c in self.coeffs)
        if not cs:
            cs = (ZERO,)
        object.__setattr__(self, "coeffs", cs)

    @staticmethod
    def zero() -> "Polynomial":
        return Polynomial((ZERO,))

    @staticmethod
    def one() -> "Polynomial":
        return Polynomial((ONE,))

    @staticmethod
    def constant(c: RationalLike) -> "Polynomial":
        return Polynomial((Rational(c),))

    @staticmethod
    def monomial(c: RationalLike, power: int) -> "Polynomial":
        """c*x^power."""
        if power < 0:
            raise ValueError("power must be non-negative")
        return Polynomial((ZERO,) * power + (Rational(c),))

    @staticmethod
    def from_ints(*coeffs: int) -> "Polynomial":
        """Build from integer coefficients, lowest power first."""
        return Polynomial(tuple(Rational(c) for c in coeffs))

    def degree(self) -> int:
        # the zero polynomial reports degree 0; use is_zero() to tell it apart
        for i in range(len(self.coeffs) - 1, -1, -1):
            if not self.coeffs[i].is_zero():
                return i
        return 0

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self.coeffs)

    def is_constant(self) -> bool:
        return self.degree() == 0

    def leading_coefficient(self) -> Rational:
        return self.coeffs[self.degree()]

    def coefficient(self, power: int) -> Rational:
        if 0 <= power < len(self.coeffs):
            return self.coeffs[power]
        return ZERO

    def trimmed(self) -> Tuple[Rational, ...]:
        return self.coeffs[: self.degree() + 1]

    def add(self, rhs: "Polynomial") -> "Polynomial":
        n = max(self.degree(), rhs.degree()) + 1
        return Polynomial(tuple(self.coefficient(i) + rhs.coefficient(i) for i in range(n)))

    def sub(self, rhs: "Polynomial") -> "Polynomial":
        n = max(self.degree(), rhs.degree()) + 1
        return Polynomial(tuple(self.coefficient(i) - rhs.coefficient(i) for i in range(n)))

    def mul(self, rhs: "Polynomial") -> "Polynomial":
        a, b = self.trimmed(), rhs.trimmed()
        prods: List[Rational] = [ZERO] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            if x.is_zero():
                continue
            for j, y in enumerate(b):
                prods[i + j] = prods[i + j] + x * y
        return Polynomial(tuple(prods))

    def scale(self, r: RationalLike) -> "Polynomial":
        return Polynomial(tuple(c * r for c in self.trimmed()))

    def evaluate(self, x: RationalLike) -> Rational:
        total = ZERO
        for c in reversed(self.trimmed()):
            total = total * x + c
        return total

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        return self.sub(rhs)

    def __mul__(self, rhs: "Polynomial | RationalLike") -> "Polynomial":
        if isinstance(rhs, Polynomial):
            return self.mul(rhs)
        if not _is_scalar(rhs):
            return NotImplemented
        return self.scale(rhs)

    def __rmul__(self, lhs: RationalLike) -> "Polynomial":
        if not _is_scalar(lhs):
            return NotImplemented
        return self.scale(lhs)

    def __neg__(self) -> "Polynomial":
        return self.scale(-1)

    def __divmod__(self, rhs: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        # Local import to avoid circular dependency at module load time
        from division import poly_divmod
        return poly_divmod(self, rhs)

    def __floordiv__(self, rhs: "Polynomial") -> "Polynomial":
        return divmod(self, rhs)[0]

    def __mod__(self, rhs: "Polynomial") -> "Polynomial":
        return divmod(self, rhs)[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.trimmed() == other.trimmed()

    def __hash__(self) -> int:
        return hash(self.trimmed())

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def to_string(self, var: str = "x") -> str:
        parts: List[str] = []
        for i in range(len(self.coeffs) - 1, -1, -1):
            c = self.coeffs[i]
            if c.is_zero():
                continue
            if c.sign() < 0:
                parts.append(" - " if parts else "-")
            elif parts:
                parts.append(" + ")
            mag = abs(c)
            if not mag.is_one() or i == 0:
                parts.append(mag.to_string())
                if i > 0:
                    parts.append("*")
            if i > 0:
                parts.append(var if i == 1 else f"{var}^{i}")
        if not parts:
            return "0"
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.to_string()!r})"

