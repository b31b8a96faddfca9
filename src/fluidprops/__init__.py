"""
fluidprops - Thermophysical properties of fluids and mixtures

Typed layer over CoolProp: substances, keyed inputs and fluids whose
outputs can only be queried once a state is defined, with per-state caching.

Author: fluidprops contributors
Date: 2026-10-18
"""

__version__ = "0.1.0"

from fluidprops.core import (
    BackendError,
    Fluid,
    FluidPropsError,
    FluidUpdateRequest,
    PropsService,
    Q_,
    UndefinedFluid,
    get_props_service,
    ureg,
)
from fluidprops.io import FluidInput, FluidParam, FluidTrivialParam, HumidAirParam, Phase
from fluidprops.substance import (
    BinaryMix,
    BinaryMixKind,
    CustomMix,
    IncompPure,
    PredefinedMix,
    Pure,
    Refrigerant,
    RefrigerantCategory,
)

__all__ = [
    "BackendError",
    "Fluid",
    "FluidPropsError",
    "FluidUpdateRequest",
    "PropsService",
    "Q_",
    "UndefinedFluid",
    "get_props_service",
    "ureg",
    "FluidInput",
    "FluidParam",
    "FluidTrivialParam",
    "HumidAirParam",
    "Phase",
    "BinaryMix",
    "BinaryMixKind",
    "CustomMix",
    "IncompPure",
    "PredefinedMix",
    "Pure",
    "Refrigerant",
    "RefrigerantCategory",
]
