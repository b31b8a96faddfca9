"""Core components: errors, units, backend service and fluid state resolution"""

from fluidprops.core.errors import (
    FluidPropsError,
    UnknownKeyError,
    CompositionError,
    NotEnoughComponentsError,
    InvalidComponentError,
    InvalidFractionError,
    InvalidFractionsSumError,
    InvalidUpdateRequestError,
    BackendError,
    StateConsumedError,
)
from fluidprops.core.units import ureg, Q_, si_magnitude
from fluidprops.core.props_service import (
    PropsBackend,
    CoolPropBackend,
    PropsService,
    get_props_service,
)
from fluidprops.core.fluid import Fluid, FluidUpdateRequest, UndefinedFluid

__all__ = [
    "FluidPropsError",
    "UnknownKeyError",
    "CompositionError",
    "NotEnoughComponentsError",
    "InvalidComponentError",
    "InvalidFractionError",
    "InvalidFractionsSumError",
    "InvalidUpdateRequestError",
    "BackendError",
    "StateConsumedError",
    "ureg",
    "Q_",
    "si_magnitude",
    "PropsBackend",
    "CoolPropBackend",
    "PropsService",
    "get_props_service",
    "Fluid",
    "FluidUpdateRequest",
    "UndefinedFluid",
]
