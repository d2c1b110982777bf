from typing import Tuple


class RDNAPException(Exception):
    """
    Base class for all errors raised by rdnap.
    """


class InvalidArgument(RDNAPException, ValueError):
    """
    Raised when an RD coordinate lies outside the domain of the transformation.

    The offending coordinate is available as structured fields so callers can
    react to it without parsing the message.

    Attributes:
        coordinate: The name of the coordinate that failed validation ("x" or "y")
        value: The offending value, in kilometers
        valid_range: The inclusive (lower, upper) bounds for that coordinate
    """

    def __init__(self, coordinate: str, value: float, valid_range: Tuple[float, float]):
        self.coordinate = coordinate
        self.value = value
        self.valid_range = valid_range
        lower, upper = valid_range
        super().__init__(
            f"{coordinate.upper()} out of bounds: {value} "
            f"(valid range [{lower}, {upper}])"
        )


class ConvergenceError(RDNAPException, RuntimeError):
    """
    Raised when the iterative latitude solver does not settle.

    This does not happen for coordinates inside the valid RD domain.
    """

    def __init__(self, iterations: int, residual: float):
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"latitude did not converge after {iterations} iterations "
            f"(last change {residual} rad)"
        )
