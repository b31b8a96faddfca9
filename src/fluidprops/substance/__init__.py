"""Substances: pure fluids, refrigerants, incompressibles and mixtures"""

from fluidprops.substance.pure import Pure
from fluidprops.substance.incomp_pure import IncompPure
from fluidprops.substance.refrigerant import Refrigerant, RefrigerantCategory
from fluidprops.substance.predefined_mix import PredefinedMix
from fluidprops.substance.binary_mix import BinaryMix, BinaryMixKind
from fluidprops.substance.custom_mix import CustomMix, CustomMixComponent
from fluidprops.substance.substance import Substance, is_substance

__all__ = [
    "Pure",
    "IncompPure",
    "Refrigerant",
    "RefrigerantCategory",
    "PredefinedMix",
    "BinaryMix",
    "BinaryMixKind",
    "CustomMix",
    "CustomMixComponent",
    "Substance",
    "is_substance",
]
