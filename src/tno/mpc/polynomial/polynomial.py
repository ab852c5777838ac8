r"""
Polynomials over a prime field.

A polynomial $p(x) = a_0 + a_1 x + \dots + a_d x^d$ is represented by its
coefficients $(a_0, \dots, a_d)$, lowest degree first. These are the building
blocks of threshold schemes such as Shamir secret sharing, where a secret is
the constant term of a random polynomial and is recovered through Lagrange
interpolation at zero.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Generic

from tno.mpc.polynomial.exceptions import PreconditionViolationError
from tno.mpc.polynomial.field import default_field
from tno.mpc.polynomial.utils import FieldElementT, FieldLike

if sys.version_info < (3, 12):
    from typing_extensions import override
else:
    from typing import override

logger = logging.getLogger(__name__)


class Polynomial(Generic[FieldElementT]):
    r"""
    Immutable polynomial with coefficients in a finite field.

    The coefficient at index $0$ is the constant term, the coefficient at
    index `degree` is the leading coefficient. A polynomial always has at
    least one coefficient.
    """

    def __init__(
        self,
        coefficients: Iterable[FieldElementT | int],
        field: FieldLike[FieldElementT] | None = None,
    ) -> None:
        """
        Construct a polynomial from its coefficients.

        :param coefficients: the coefficients, starting from the constant term;
            integers are converted to elements of `field`
        :param field: the field the coefficients live in, defaults to the
            BLS12-381 scalar field
        :raise PreconditionViolationError: if no coefficients are given, or a
            coefficient belongs to another field
        """
        self._field: FieldLike[FieldElementT] = (
            field if field is not None else default_field()  # type: ignore[assignment]
        )
        self._coefficients: tuple[FieldElementT, ...] = tuple(
            self._field.from_int(c) if isinstance(c, int) else c for c in coefficients
        )
        if not self._coefficients:
            raise PreconditionViolationError(
                "A polynomial needs at least one coefficient."
            )
        for coefficient in self._coefficients:
            self._check_field(coefficient)

    @classmethod
    def random(
        cls, degree: int, field: FieldLike[FieldElementT] | None = None
    ) -> Polynomial[FieldElementT]:
        """
        Return a polynomial of the given degree with uniformly random coefficients.

        All `degree + 1` coefficients, including the leading one, are sampled
        independently, so the quality of the randomness is that of the field's
        sampling primitive.

        :param degree: the degree of the polynomial
        :param field: the field to sample the coefficients from, defaults to
            the BLS12-381 scalar field
        :raise PreconditionViolationError: if the degree is negative
        :return: the random polynomial
        """
        if degree < 0:
            raise PreconditionViolationError(
                f"The degree of a polynomial must be non-negative, got {degree}."
            )
        if field is None:
            field = default_field()  # type: ignore[assignment]
        logger.debug("Sampling random polynomial of degree %d over %s", degree, field)
        # one extra coefficient for the constant term
        return cls(field.random_vector(degree + 1), field)

    @property
    def degree(self) -> int:
        """
        Return the degree of the polynomial.

        :return: the number of coefficients minus one
        """
        return len(self._coefficients) - 1

    @property
    def coefficients(self) -> tuple[FieldElementT, ...]:
        """
        Return the coefficients, starting from the constant term.

        The returned tuple is the polynomial's own storage, no copy is made.

        :return: the coefficients of the polynomial
        """
        return self._coefficients

    @property
    def field(self) -> FieldLike[FieldElementT]:
        """
        Return the field the coefficients live in.

        :return: the field of the polynomial
        """
        return self._field

    def eval(self, x: FieldElementT | int) -> FieldElementT:
        r"""
        Evaluate the polynomial in the point `x`.

        Uses Horner's method, reading the coefficients from the highest to the
        lowest degree:
        $p(x) = a_0 + x(a_1 + x(a_2 + \dots + x(a_{d-1} + x a_d)))$.
        This takes `degree` multiplications and additions and never computes
        powers of `x`.

        :param x: the point to evaluate in; an integer is converted to a field
            element first
        :raise PreconditionViolationError: if `x` belongs to another field
        :return: the value $p(x)$
        """
        if isinstance(x, int):
            x = self._field.from_int(x)
        else:
            self._check_field(x)
        if x.is_zero():
            return self._coefficients[0]

        result = self._coefficients[-1]
        for coefficient in reversed(self._coefficients[:-1]):
            result = result * x + coefficient
        return result

    __call__ = eval

    def _check_field(self, element: FieldElementT) -> None:
        """
        Verify that an element lives in the field of this polynomial.

        Only elements exposing their field, such as `PrimeFieldElement`, can be
        verified.

        :param element: the element to verify
        :raise PreconditionViolationError: if the element belongs to another field
        """
        element_field = getattr(element, "field", self._field)
        if element_field != self._field:
            raise PreconditionViolationError(
                f"Element of {element_field} cannot be used in a polynomial over "
                f"{self._field}."
            )

    @staticmethod
    def lagrange_basis_at_0(
        x_coords: Iterable[int],
        i: int,
        field: FieldLike[FieldElementT] | None = None,
    ) -> FieldElementT:
        r"""
        Return the Lagrange basis polynomial $\ell_i$ evaluated at $x = 0$.

        For the interpolation nodes `x_coords` this is
        $\ell_i(0) = \prod_{x \neq i} \frac{x}{x - i}$.
        Given shares $p(j)$ for every $j$ in `x_coords`, the secret is
        $p(0) = \sum_j p(j) \ell_j(0)$.

        The term with $x = i$ is skipped. It is up to the caller whether `i`
        itself is one of the nodes. The nodes are treated as a set, so their
        order does not influence the result. Without any node other than `i`
        the empty product $1$ is returned.

        :param x_coords: the x-coordinates of the interpolation nodes
        :param i: the x-coordinate of the node to compute the basis for
        :param field: the field to compute in, defaults to the BLS12-381 scalar
            field
        :raise PreconditionViolationError: if a coordinate or `i` is negative
        :raise NonInvertibleElementError: if two coordinates coincide modulo
            the field's modulus, such that the denominator is zero
        :return: the value $\ell_i(0)$
        """
        if field is None:
            field = default_field()  # type: ignore[assignment]
        nodes = frozenset(x_coords)
        if i < 0 or any(x < 0 for x in nodes):
            raise PreconditionViolationError(
                f"Interpolation coordinates must be non-negative, got {sorted(nodes)} "
                f"and index {i}."
            )
        if nodes <= {i}:
            logger.debug("No nodes besides %d, Lagrange basis is the empty product", i)

        numerator = field.one
        denominator = field.one
        i_elem = field.from_int(i)
        for x in nodes:
            if x == i:
                continue
            x_elem = field.from_int(x)
            numerator = numerator * x_elem
            denominator = denominator * (x_elem - i_elem)
        return numerator * denominator.inverse()

    def __len__(self) -> int:
        return len(self._coefficients)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._field == other.field and self._coefficients == other.coefficients

    @override
    def __hash__(self) -> int:
        return hash((self._field, self._coefficients))

    @override
    def __str__(self) -> str:
        terms: list[str] = []
        for power, coefficient in enumerate(self._coefficients):
            if power == 0:
                terms.append(f"{coefficient}")
            elif power == 1:
                terms.append(f"{coefficient} x")
            else:
                terms.append(f"{coefficient} x^{power}")
        return " + ".join(terms)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._coefficients)!r}, {self._field!r})"
