from typing import Union

VALID_UNITS = ("B", "KB", "MB", "GB")


class InvalidUnitError(ValueError):
    """Raised when a size is requested in a unit we don't know about."""


def convert_size(size_kb: int, unit: str) -> Union[int, float]:
    """Convert a size reported in kilobytes into the requested display unit.

    KB is the 1024-based unit the GitHub API reports sizes in.

    Args:
        size_kb: Size in kilobytes
        unit: One of B, KB, MB, GB

    Returns:
        int for B and KB, float rounded to two decimals for MB and GB

    Raises:
        InvalidUnitError: If the unit is not recognised
    """
    if unit == "B":
        return size_kb * 1024
    if unit == "KB":
        return size_kb
    if unit == "MB":
        return round(size_kb / 1024, 2)
    if unit == "GB":
        return round(size_kb / 1024 / 1024, 2)
    raise InvalidUnitError(f"Invalid unit: {unit}. Use one of {', '.join(VALID_UNITS)}")
