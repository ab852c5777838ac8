r"""
Arithmetic in a prime field $\mathbb{F}_p$.

The polynomial logic is written against the protocols in
`tno.mpc.polynomial.utils`, this module provides the default implementation
of that collaborator on top of the number theoretic helpers of
`tno.mpc.encryption_schemes.utils`.
"""

from __future__ import annotations

import secrets
import sys
from functools import cached_property, lru_cache
from typing import Union

from tno.mpc.encryption_schemes.utils import is_prime, mod_inv, pow_mod

from tno.mpc.polynomial.exceptions import (
    NonInvertibleElementError,
    PreconditionViolationError,
)

if sys.version_info < (3, 12):
    from typing_extensions import override
else:
    from typing import override

BLS12_381_SCALAR_ORDER = (
    0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
)
"""Order $r$ of the scalar field of the BLS12-381 pairing-friendly curve."""


class PrimeField:
    r"""
    The finite field $\mathbb{F}_p$ of integers modulo a prime $p$.

    Acts as the factory for its elements: it provides the identities,
    conversion from integers and uniform random sampling.
    """

    def __init__(self, modulus: int = BLS12_381_SCALAR_ORDER) -> None:
        """
        Construct a new prime field.

        :param modulus: the prime order of the field
        :raise PreconditionViolationError: if the modulus is not a prime
        """
        if modulus < 2 or not is_prime(modulus):
            raise PreconditionViolationError(
                f"The modulus of a prime field must be a prime, got {modulus}."
            )
        self.modulus = modulus

    @cached_property
    def zero(self) -> PrimeFieldElement:
        """
        Return the additive identity of the field.

        :return: the element $0$
        """
        return PrimeFieldElement(0, self)

    @cached_property
    def one(self) -> PrimeFieldElement:
        """
        Return the multiplicative identity of the field.

        :return: the element $1$
        """
        return PrimeFieldElement(1, self)

    def from_int(self, value: int) -> PrimeFieldElement:
        """
        Convert an integer to an element of the field.

        :param value: the integer, it is reduced modulo the field's modulus
        :return: the corresponding field element
        """
        return PrimeFieldElement(value, self)

    __call__ = from_int

    def random(self) -> PrimeFieldElement:
        """
        Sample a uniformly random element of the field.

        :return: the sampled element
        """
        return PrimeFieldElement(secrets.randbelow(self.modulus), self)

    def random_vector(self, length: int) -> tuple[PrimeFieldElement, ...]:
        """
        Sample independent uniformly random elements of the field.

        :param length: the number of elements to sample
        :raise PreconditionViolationError: if the length is negative
        :return: the sampled elements
        """
        if length < 0:
            raise PreconditionViolationError(
                f"Cannot sample a vector of negative length {length}."
            )
        return tuple(self.random() for _ in range(length))

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    @override
    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.modulus))

    @override
    def __str__(self) -> str:
        return f"{self.__class__.__name__}(modulus={self.modulus})"

    @override
    def __repr__(self) -> str:
        return str(self)


Operand = Union["PrimeFieldElement", int]


class PrimeFieldElement:
    """
    An element of a `PrimeField`.

    Elements are immutable value types. Arithmetic is supported with other
    elements of the same field and with plain integers. An element only
    compares equal to the integer that is its canonical representative.
    """

    __slots__ = ("_value", "_field")

    def __init__(self, value: int, field: PrimeField) -> None:
        """
        Construct a new field element.

        :param value: integer representative, reduced modulo the field's modulus
        :param field: the field this element belongs to
        """
        self._value = value % field.modulus
        self._field = field

    @property
    def value(self) -> int:
        """
        Return the canonical representative of this element.

        :return: an integer in $[0, p)$
        """
        return self._value

    @property
    def field(self) -> PrimeField:
        """
        Return the field this element belongs to.

        :return: the field of this element
        """
        return self._field

    def _coerce(self, other: Operand) -> int:
        if isinstance(other, PrimeFieldElement):
            if other.field != self._field:
                raise PreconditionViolationError(
                    f"Cannot combine elements of {self._field} and {other.field}."
                )
            return other.value
        return other % self._field.modulus

    def __add__(self, other: Operand) -> PrimeFieldElement:
        if not isinstance(other, (PrimeFieldElement, int)):
            return NotImplemented
        return PrimeFieldElement(self._value + self._coerce(other), self._field)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> PrimeFieldElement:
        if not isinstance(other, (PrimeFieldElement, int)):
            return NotImplemented
        return PrimeFieldElement(self._value - self._coerce(other), self._field)

    def __rsub__(self, other: int) -> PrimeFieldElement:
        if not isinstance(other, int):
            return NotImplemented
        return PrimeFieldElement(other - self._value, self._field)

    def __mul__(self, other: Operand) -> PrimeFieldElement:
        if not isinstance(other, (PrimeFieldElement, int)):
            return NotImplemented
        return PrimeFieldElement(self._value * self._coerce(other), self._field)

    __rmul__ = __mul__

    def __neg__(self) -> PrimeFieldElement:
        return PrimeFieldElement(-self._value, self._field)

    def __pow__(self, exponent: int) -> PrimeFieldElement:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** -exponent
        return PrimeFieldElement(
            pow_mod(self._value, exponent, self._field.modulus), self._field
        )

    def __truediv__(self, other: Operand) -> PrimeFieldElement:
        if not isinstance(other, (PrimeFieldElement, int)):
            return NotImplemented
        return self * PrimeFieldElement(self._coerce(other), self._field).inverse()

    def __rtruediv__(self, other: int) -> PrimeFieldElement:
        if not isinstance(other, int):
            return NotImplemented
        return self.inverse() * other

    def inverse(self) -> PrimeFieldElement:
        """
        Return the multiplicative inverse of this element.

        :raise NonInvertibleElementError: if this element is zero
        :return: the inverse of this element
        """
        if self.is_zero():
            raise NonInvertibleElementError(
                f"The zero element of {self._field} has no multiplicative inverse."
            )
        return PrimeFieldElement(
            mod_inv(self._value, self._field.modulus), self._field
        )

    def is_zero(self) -> bool:
        """
        Return whether this element is the additive identity.

        :return: whether this element is zero
        """
        return self._value == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self._value

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrimeFieldElement):
            return self._field == other.field and self._value == other.value
        if isinstance(other, int):
            return other == self._value
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._value)

    @override
    def __str__(self) -> str:
        return str(self._value)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value}, modulus={self._field.modulus})"


@lru_cache(maxsize=None)
def default_field() -> PrimeField:
    """
    Return the field used when no field is specified explicitly.

    :return: the scalar field of the BLS12-381 curve
    """
    return PrimeField(BLS12_381_SCALAR_ORDER)
