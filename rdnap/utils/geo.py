def dms_to_arcseconds(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """
    Express an angle given in degrees, minutes and seconds as arc-seconds.

    Args:
        degrees: The whole degrees of the angle
        minutes: The arc-minutes of the angle
        seconds: The arc-seconds of the angle

    Returns:
        The angle in arc-seconds

    Examples:
        >>> dms_to_arcseconds(5, 23, 15.5)
        19395.5
    """
    return (degrees * 60 + minutes) * 60 + seconds


def arcseconds_to_degrees(arcseconds):
    """Convert arc-seconds to decimal degrees; works on scalars and numpy arrays."""
    return arcseconds / 3600
