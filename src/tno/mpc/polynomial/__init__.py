"""
Root imports for the tno.mpc.polynomial package.
"""

# Explicit re-export of all functionalities, such that they can be imported properly. Following
# https://www.python.org/dev/peps/pep-0484/#stub-files and
# https://mypy.readthedocs.io/en/stable/command_line.html#cmdoption-mypy-no-implicit-reexport
from tno.mpc.polynomial.exceptions import (
    NonInvertibleElementError as NonInvertibleElementError,
)
from tno.mpc.polynomial.exceptions import (
    PreconditionViolationError as PreconditionViolationError,
)
from tno.mpc.polynomial.field import BLS12_381_SCALAR_ORDER as BLS12_381_SCALAR_ORDER
from tno.mpc.polynomial.field import PrimeField as PrimeField
from tno.mpc.polynomial.field import PrimeFieldElement as PrimeFieldElement
from tno.mpc.polynomial.polynomial import Polynomial as Polynomial
from tno.mpc.polynomial.utils import FieldLike as FieldLike
from tno.mpc.polynomial.utils import SupportsFieldArithmetic as SupportsFieldArithmetic

__version__ = "0.1.0"
