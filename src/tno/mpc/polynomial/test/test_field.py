"""
Test module for the prime field arithmetic underlying the polynomials.
"""

from __future__ import annotations

import pytest

from tno.mpc.polynomial.exceptions import (
    NonInvertibleElementError,
    PreconditionViolationError,
)
from tno.mpc.polynomial.field import (
    BLS12_381_SCALAR_ORDER,
    PrimeField,
    PrimeFieldElement,
    default_field,
)
from tno.mpc.polynomial.utils import SupportsFieldArithmetic

SMALL_PRIME = 17

INVALID_MODULI = [0, 1, 4, 15, 1679]


@pytest.fixture(name="small_field")
def fixture_small_field() -> PrimeField:
    """
    Creates the field of integers modulo 17.

    :return: a small prime field
    """
    return PrimeField(SMALL_PRIME)


def test_default_field() -> None:
    """
    Test that the default field is the BLS12-381 scalar field.
    """
    assert default_field().modulus == BLS12_381_SCALAR_ORDER
    assert default_field() is default_field()
    assert PrimeField() == default_field()


@pytest.mark.parametrize("modulus", INVALID_MODULI)
def test_invalid_modulus(modulus: int) -> None:
    """
    Test that only prime moduli are accepted.

    :param modulus: a modulus that is not a prime
    """
    with pytest.raises(PreconditionViolationError, match="must be a prime"):
        PrimeField(modulus)


def test_identities(small_field: PrimeField) -> None:
    """
    Test the additive and multiplicative identities.

    :param small_field: the field modulo 17
    """
    assert small_field.zero.is_zero()
    assert not small_field.one.is_zero()
    assert small_field.zero == 0
    assert small_field.one == 1
    assert small_field.from_int(9) + small_field.zero == 9
    assert small_field.from_int(9) * small_field.one == 9


def test_from_int_reduces(small_field: PrimeField) -> None:
    """
    Test that integers are reduced modulo the field's modulus.

    :param small_field: the field modulo 17
    """
    assert small_field.from_int(18).value == 1
    assert small_field(-1).value == SMALL_PRIME - 1
    assert int(small_field(34)) == 0


@pytest.mark.parametrize(
    "left, right, expected_sum, expected_difference, expected_product",
    [
        (3, 4, 7, 16, 12),
        (16, 2, 1, 14, 15),
        (0, 5, 5, 12, 0),
        (9, 9, 1, 0, 13),
    ],
)
def test_arithmetic(
    small_field: PrimeField,
    left: int,
    right: int,
    expected_sum: int,
    expected_difference: int,
    expected_product: int,
) -> None:
    """
    Test addition, subtraction and multiplication modulo 17.

    :param small_field: the field modulo 17
    :param left: left operand
    :param right: right operand
    :param expected_sum: the expected value of left + right
    :param expected_difference: the expected value of left - right
    :param expected_product: the expected value of left * right
    """
    a, b = small_field(left), small_field(right)
    assert a + b == expected_sum
    assert a - b == expected_difference
    assert a * b == expected_product


def test_arithmetic_with_int(small_field: PrimeField) -> None:
    """
    Test that plain integers can be used as either operand.

    :param small_field: the field modulo 17
    """
    a = small_field(5)
    assert a + 13 == 1
    assert 13 + a == 1
    assert a - 6 == 16
    assert 6 - a == 1
    assert a * 4 == 3
    assert 4 * a == 3
    assert sum([a, a, a], small_field.zero) == 15


def test_negation(small_field: PrimeField) -> None:
    """
    Test the additive inverse.

    :param small_field: the field modulo 17
    """
    a = small_field(5)
    assert -a == 12
    assert a + (-a) == small_field.zero
    assert -small_field.zero == small_field.zero


@pytest.mark.parametrize("value", range(1, SMALL_PRIME))
def test_inverse(small_field: PrimeField, value: int) -> None:
    """
    Test the multiplicative inverse of every non-zero element.

    :param small_field: the field modulo 17
    :param value: a non-zero element
    """
    a = small_field(value)
    assert a * a.inverse() == small_field.one
    assert a / a == small_field.one
    assert 1 / a == a.inverse()


def test_inverse_of_zero(small_field: PrimeField) -> None:
    """
    Test that inverting zero raises an arithmetic error.

    :param small_field: the field modulo 17
    """
    with pytest.raises(NonInvertibleElementError, match="no multiplicative inverse"):
        small_field.zero.inverse()
    with pytest.raises(ZeroDivisionError):
        small_field(3) / small_field(17)


def test_pow(small_field: PrimeField) -> None:
    """
    Test exponentiation, including negative exponents.

    :param small_field: the field modulo 17
    """
    a = small_field(2)
    assert a**0 == 1
    assert a**4 == 16
    assert a**8 == 1
    assert a**-1 == 9
    assert (a**-3) * (a**3) == 1


def test_equality_and_hash(small_field: PrimeField) -> None:
    """
    Test that elements compare and hash by value within the same field.

    :param small_field: the field modulo 17
    """
    assert small_field(3) == small_field(20)
    assert hash(small_field(3)) == hash(small_field(20))
    assert small_field(3) == 3
    assert small_field(3) != 20
    assert small_field(-1) == SMALL_PRIME - 1
    assert small_field(-1) != -1
    assert small_field(3) != PrimeField(19)(3)
    assert len({small_field(1), small_field(18), small_field(2)}) == 2
    assert small_field == PrimeField(SMALL_PRIME)
    assert small_field != PrimeField(19)


def test_mixing_fields(small_field: PrimeField) -> None:
    """
    Test that elements of different fields cannot be combined.

    :param small_field: the field modulo 17
    """
    other = PrimeField(19)
    with pytest.raises(PreconditionViolationError, match="Cannot combine"):
        small_field(3) + other(3)
    with pytest.raises(PreconditionViolationError, match="Cannot combine"):
        small_field(3) * other(3)


def test_random(small_field: PrimeField) -> None:
    """
    Test that random elements lie in the field and are not constant.

    :param small_field: the field modulo 17
    """
    samples = [small_field.random() for _ in range(200)]
    assert all(0 <= sample.value < SMALL_PRIME for sample in samples)
    assert len({sample.value for sample in samples}) > 1


@pytest.mark.parametrize("length", [0, 1, 11])
def test_random_vector(length: int) -> None:
    """
    Test that a random vector has the requested number of elements.

    :param length: the number of elements to sample
    """
    field = default_field()
    vector = field.random_vector(length)
    assert isinstance(vector, tuple)
    assert len(vector) == length
    assert all(element.field == field for element in vector)


def test_random_vector_negative_length(small_field: PrimeField) -> None:
    """
    Test that a negative length is rejected.

    :param small_field: the field modulo 17
    """
    with pytest.raises(PreconditionViolationError, match="negative length"):
        small_field.random_vector(-1)


def test_supports_field_arithmetic(small_field: PrimeField) -> None:
    """
    Test that field elements satisfy the protocol the polynomials rely on.

    :param small_field: the field modulo 17
    """
    assert isinstance(small_field(4), SupportsFieldArithmetic)
    assert not isinstance(4, SupportsFieldArithmetic)


def test_str_and_repr(small_field: PrimeField) -> None:
    """
    Test the string representations.

    :param small_field: the field modulo 17
    """
    assert str(small_field(20)) == "3"
    assert repr(small_field(20)) == "PrimeFieldElement(3, modulus=17)"
    assert str(small_field) == "PrimeField(modulus=17)"
    assert isinstance(small_field(3), PrimeFieldElement)


@pytest.mark.parametrize("value", [-18, -1, 0, 3, 16, 17, 20, 3 * SMALL_PRIME + 5])
def test_equal_to_int_implies_equal_hash(small_field: PrimeField, value: int) -> None:
    """
    Test that an element equal to an integer also hashes like that integer.

    :param small_field: the field modulo 17
    :param value: an integer to convert to the field
    """
    element = small_field(value)
    for other in (value, element.value, value + SMALL_PRIME, value - SMALL_PRIME):
        if element == other:
            assert hash(element) == hash(other)
    assert element.value in {element}
    assert element in {element.value}
    assert {element: "share"}[element.value] == "share"


def test_non_canonical_int_not_in_set(small_field: PrimeField) -> None:
    """
    Test that non-canonical integers are not found among field elements.

    :param small_field: the field modulo 17
    """
    elements = {small_field(3)}
    assert 3 in elements
    assert 20 not in elements
