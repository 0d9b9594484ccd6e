"""Univariate polynomials kept in decreasing order of exponent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union


@dataclass(frozen=True)
class Term:
    """One term coeff * x^exp."""

    coeff: int
    exp: int

    def __str__(self) -> str:
        return f"{self.coeff}x^{self.exp}"


class Polynomial:
    """A polynomial as a sequence of terms in decreasing exponent order."""

    def __init__(
        self, terms: Iterable[Union[Term, tuple[int, int]]] = ()
    ) -> None:
        self._terms = tuple(
            term if isinstance(term, Term) else Term(*term) for term in terms
        )

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result: list[Term] = []
        left, right = list(self._terms), list(other._terms)
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.exp == b.exp:
                result.append(Term(a.coeff + b.coeff, a.exp))
                i += 1
                j += 1
            elif a.exp > b.exp:
                result.append(a)
                i += 1
            else:
                result.append(b)
                j += 1
        result.extend(left[i:])
        result.extend(right[j:])
        return Polynomial(result)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        coeffs: dict[int, int] = {}
        for a in self._terms:
            for b in other._terms:
                exp = a.exp + b.exp
                coeffs[exp] = coeffs.get(exp, 0) + a.coeff * b.coeff
        return Polynomial(
            Term(coeffs[exp], exp) for exp in sorted(coeffs, reverse=True)
        )

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._terms)!r})"