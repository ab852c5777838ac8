"""
General utilities describing the finite field the polynomials are defined over.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SupportsFieldArithmetic(Protocol):
    """
    Protocol used to check if a class behaves like an element of a field.

    The polynomial logic only relies on these operations, so any field
    implementation providing them can be substituted.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, other: Any) -> Any:
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> Any:
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> Any:
        pass

    @abstractmethod
    def __neg__(self) -> Any:
        pass

    @abstractmethod
    def inverse(self) -> Any:
        """
        Return the multiplicative inverse of this element.

        :return: the element $y$ such that $x \\cdot y = 1$
        """

    @abstractmethod
    def is_zero(self) -> bool:
        """
        Return whether this element is the additive identity.

        :return: whether this element equals zero
        """


FieldElementT = TypeVar("FieldElementT", bound=SupportsFieldArithmetic)
"""Type of the coefficients of a polynomial and of the points it is evaluated in."""


class FieldLike(Protocol[T_co]):
    """
    Protocol for the factory of field elements, i.e. the field itself.
    """

    @property
    def zero(self) -> T_co:
        """Additive identity of the field."""

    @property
    def one(self) -> T_co:
        """Multiplicative identity of the field."""

    def from_int(self, value: int) -> T_co:
        """
        Construct a field element from a (small) integer.

        :param value: the integer to convert
        :return: the corresponding field element
        """

    def random(self) -> T_co:
        """
        Sample a uniformly random field element.

        :return: the sampled element
        """

    def random_vector(self, length: int) -> tuple[T_co, ...]:
        """
        Sample a number of independent uniformly random field elements.

        :param length: the number of elements to sample
        :return: the sampled elements
        """
