"""
Units - pint boundary for dimensioned inputs

All quantities entering fluidprops are reduced to their SI magnitude here.

Author: fluidprops contributors
Date: 2026-10-18
"""

from typing import Union

import pint

ureg = pint.UnitRegistry(autoconvert_offset_to_baseunit=True)
Q_ = ureg.Quantity

Scalar = Union[float, int, pint.Quantity]


def si_magnitude(value: Scalar, si_unit: str) -> float:
    """
    Extract the magnitude of a value in the given SI unit.

    Args:
        value: pint quantity, or plain number already expressed in si_unit
        si_unit: Target SI unit (e.g. 'Pa', 'K', 'J/kg/K', 'dimensionless')

    Returns:
        Magnitude in si_unit

    Raises:
        pint.DimensionalityError: If the quantity cannot be expressed in si_unit
    """
    if isinstance(value, pint.Quantity):
        return float(value.to(si_unit).magnitude)
    return float(value)
