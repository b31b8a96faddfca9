"""
Substance - closed set of substance kinds accepted by a fluid

Author: fluidprops contributors
Date: 2026-10-18
"""

from typing import Union

from fluidprops.substance.binary_mix import BinaryMix
from fluidprops.substance.custom_mix import CustomMix
from fluidprops.substance.incomp_pure import IncompPure
from fluidprops.substance.predefined_mix import PredefinedMix
from fluidprops.substance.pure import Pure
from fluidprops.substance.refrigerant import Refrigerant

Substance = Union[Pure, IncompPure, Refrigerant, PredefinedMix, BinaryMix, CustomMix]

SUBSTANCE_TYPES = (Pure, IncompPure, Refrigerant, PredefinedMix, BinaryMix, CustomMix)


def is_substance(value) -> bool:
    """True if value is one of the supported substance kinds."""
    return isinstance(value, SUBSTANCE_TYPES)
