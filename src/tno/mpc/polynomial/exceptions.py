class PreconditionViolationError(ValueError):
    """
    Exception raised when an input lies outside of the documented valid range.
    """

    def __init__(self, specific_reason: str) -> None:
        """
        Initialize the exception with a specific reason and general tip.

        :param specific_reason: The specific reason why the input is invalid.
        """
        general_tip = (
            "Validate degrees, coordinates and moduli before passing them "
            "to `tno.mpc.polynomial`."
        )
        super().__init__(f"{specific_reason} {general_tip}")


class NonInvertibleElementError(ZeroDivisionError):
    """
    Exception raised when the zero element of a field is inverted.
    """

    def __init__(self, specific_reason: str) -> None:
        """
        Initialize the exception with a specific reason and general tip.

        :param specific_reason: The specific reason why an inversion was attempted.
        """
        general_tip = (
            "Make sure all interpolation coordinates are distinct modulo "
            "the field's modulus."
        )
        super().__init__(f"{specific_reason} {general_tip}")
