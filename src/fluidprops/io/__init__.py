"""Keys and keyed inputs of the property backend"""

from fluidprops.io.keys import KeyRegistry, code_of, name_of
from fluidprops.io.fluid_param import FluidParam, FluidTrivialParam
from fluidprops.io.humid_air_param import HumidAirParam
from fluidprops.io.phase import Phase
from fluidprops.io.fluid_input import FluidInput

__all__ = [
    "KeyRegistry",
    "code_of",
    "name_of",
    "FluidParam",
    "FluidTrivialParam",
    "HumidAirParam",
    "Phase",
    "FluidInput",
]
