"""
PropsService - Singleton factory of CoolProp backend handles

All property evaluations go through a PropsBackend created by this service.
The default backend wraps CoolProp's low-level AbstractState; tests and
alternative evaluators provide their own service with a create_backend method.

Author: fluidprops contributors
Date: 2026-10-18
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Callable, Optional, Sequence, Union

import CoolProp.CoolProp as CP

from fluidprops.core.errors import BackendError
from fluidprops.io.fluid_param import FluidParam, FluidTrivialParam

OutputKey = Union[FluidParam, FluidTrivialParam]

# Fraction bases accepted by set_fractions
FRACTION_BASES = ("mole", "mass", "volume")


class PropsBackend(ABC):
    """
    Backend handle bound to one substance.

    Accepts an update with two keyed inputs and answers single-key queries.
    Not thread-safe: each fluid owns its own handle.

    Implementations report every failure as BackendError; fluids only roll
    back a rejected update on that error.
    """

    @abstractmethod
    def set_fractions(self, fractions: Sequence[float], basis: str = "mole") -> None:
        """Set mixture fractions (binary and custom mixtures only)."""

    @abstractmethod
    def update(self, key_a: FluidParam, value_a: float, key_b: FluidParam, value_b: float) -> None:
        """
        Resolve the state from two keyed inputs (SI values).

        Raises:
            BackendError: If the inputs are rejected. Other exception types
                are not rolled back by Fluid.update()
        """

    @abstractmethod
    def keyed_output(self, key: OutputKey) -> float:
        """Value of a single parameter (SI units) for the current state."""


@lru_cache(maxsize=None)
def _parameter_index(canonical: str) -> int:
    return CP.get_parameter_index(canonical)


class CoolPropBackend(PropsBackend):
    """
    PropsBackend on top of CoolProp.AbstractState.

    Every CoolProp failure is logged and re-raised as BackendError.
    """

    def __init__(self, backend_name: str, fluid_name: str):
        """
        Create the CoolProp handle.

        Args:
            backend_name: CoolProp backend (e.g. 'HEOS', 'INCOMP')
            fluid_name: CoolProp fluid name (e.g. 'Water', 'R32&R125')

        Raises:
            BackendError: If CoolProp cannot create the handle
        """
        self.logger = logging.getLogger(__name__)
        self.backend_name = backend_name
        self.fluid_name = fluid_name
        self._state = self._safe_call(
            f"AbstractState({backend_name}, {fluid_name})",
            CP.AbstractState, backend_name, fluid_name,
        )

    def _safe_call(self, description: str, func: Callable, *args):
        """
        Safe wrapper for CoolProp calls with error handling.

        Args:
            description: Human-readable description of the call for messages
            func: CoolProp callable
            *args: Positional arguments of the call

        Returns:
            Result of the call

        Raises:
            BackendError: If CoolProp raises
        """
        try:
            return func(*args)
        except Exception as e:
            error_msg = (
                f"CoolProp error: {description} | "
                f"{self.backend_name}::{self.fluid_name} | "
                f"Error: {str(e)}"
            )
            self.logger.error(error_msg)
            raise BackendError(error_msg) from e

    def set_fractions(self, fractions: Sequence[float], basis: str = "mole") -> None:
        if basis not in FRACTION_BASES:
            raise ValueError(f"Unknown fraction basis {basis!r}, expected one of {FRACTION_BASES}")
        setter = {
            "mole": self._state.set_mole_fractions,
            "mass": self._state.set_mass_fractions,
            "volume": self._state.set_volu_fractions,
        }[basis]
        values = [float(f) for f in fractions]
        self._safe_call(f"set_{basis}_fractions({values})", setter, values)

    def update(self, key_a: FluidParam, value_a: float, key_b: FluidParam, value_b: float) -> None:
        description = f"update({key_a.canonical}={value_a:.6g}, {key_b.canonical}={value_b:.6g})"
        input_pair, value_1, value_2 = self._safe_call(
            description, CP.generate_update_pair,
            self._index(key_a), value_a, self._index(key_b), value_b,
        )
        self._safe_call(description, self._state.update, input_pair, value_1, value_2)

    def keyed_output(self, key: OutputKey) -> float:
        return self._safe_call(
            f"keyed_output({key.canonical})", self._state.keyed_output, self._index(key),
        )

    def _index(self, key: OutputKey) -> int:
        return self._safe_call(f"parameter index of {key.canonical}", _parameter_index, key.canonical)


class PropsService:
    """
    Singleton factory of backend handles.

    Implements singleton pattern to ensure a single instance across the
    application. Holds no per-fluid state.
    """

    _instance: Optional['PropsService'] = None
    _initialized: bool = False

    def __new__(cls) -> 'PropsService':
        """Ensure only one instance exists (Singleton pattern)."""
        if cls._instance is None:
            cls._instance = super(PropsService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logger only once."""
        if not PropsService._initialized:
            self.logger = logging.getLogger(__name__)
            PropsService._initialized = True

    def create_backend(self, backend_name: str, fluid_name: str) -> PropsBackend:
        """
        Create a new, independent backend handle.

        Args:
            backend_name: Backend family (e.g. 'HEOS', 'INCOMP')
            fluid_name: Substance name for the backend

        Returns:
            CoolProp backend handle

        Raises:
            BackendError: If the handle cannot be created
        """
        self.logger.debug("Creating backend %s::%s", backend_name, fluid_name)
        return CoolPropBackend(backend_name, fluid_name)


# Global singleton instance accessor
def get_props_service() -> PropsService:
    """
    Get the global PropsService singleton instance.

    Returns:
        PropsService singleton instance
    """
    return PropsService()
