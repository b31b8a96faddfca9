"""
Errors - Exception hierarchy for fluidprops

Every error raised for invalid input or a failed calculation derives from
FluidPropsError, which is a ValueError so callers catching ValueError keep
working.

Author: fluidprops contributors
Date: 2026-10-18
"""


class FluidPropsError(ValueError):
    """Base class for all fluidprops input and calculation errors."""


class UnknownKeyError(FluidPropsError):
    """Unrecognized symbolic name or numeric code in a key registry."""


class CompositionError(FluidPropsError):
    """Invalid mixture composition."""


class NotEnoughComponentsError(CompositionError):
    """Custom mixture with fewer than two distinct components."""


class InvalidComponentError(CompositionError):
    """Mixture component that is not allowed in a custom mixture."""


class InvalidFractionError(CompositionError):
    """Fraction outside (0, 1) or outside the bounds of a binary mixture kind."""


class InvalidFractionsSumError(CompositionError):
    """Fractions of a custom mixture do not sum to 1."""


class InvalidUpdateRequestError(FluidPropsError):
    """Update request that cannot determine a state (e.g. duplicate keys)."""


class BackendError(FluidPropsError):
    """Failure reported by the property evaluation backend."""


class StateConsumedError(RuntimeError):
    """Undefined-state fluid used after it was turned into a defined one."""
