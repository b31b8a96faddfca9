"""
Fluid - state resolution and output caching

The lifecycle of a fluid is encoded in two types:

- UndefinedFluid: created from a substance, no state yet. Only
  composition-independent (trivial) outputs are available.
- Fluid: obtained from UndefinedFluid.update(); state-dependent outputs
  are available through output() and the convenience properties.

State-dependent outputs are cached per instance and the cache is cleared
after each successful update. Trivial outputs are cached for the lifetime
of the instance.

Instances are not thread-safe; use clone() or in_state() to give each
thread its own fluid.

Author: fluidprops contributors
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from fluidprops.core.errors import BackendError, InvalidUpdateRequestError, StateConsumedError
from fluidprops.core.props_service import PropsBackend, PropsService, get_props_service
from fluidprops.io.fluid_input import FluidInput
from fluidprops.io.fluid_param import FluidParam, FluidTrivialParam
from fluidprops.io.phase import Phase
from fluidprops.substance.binary_mix import BinaryMix
from fluidprops.substance.custom_mix import CustomMix
from fluidprops.substance.substance import Substance, is_substance

logger = logging.getLogger(__name__)

# Passed by Fluid._resolve; direct construction is rejected
_RESOLVE_KEY = object()


@dataclass(frozen=True, eq=False)
class FluidUpdateRequest:
    """
    Unordered pair of keyed inputs defining a fluid state.

    Attributes:
        first: First keyed input
        second: Second keyed input (with a different key)
    """
    first: FluidInput
    second: FluidInput

    def __post_init__(self):
        if self.first.key is self.second.key:
            raise InvalidUpdateRequestError(
                f"Inputs must have different keys, got {self.first.key.canonical} twice"
            )

    @property
    def inputs(self) -> Tuple[FluidInput, FluidInput]:
        return self.first, self.second

    def __eq__(self, other) -> bool:
        if not isinstance(other, FluidUpdateRequest):
            return NotImplemented
        return frozenset(self.inputs) == frozenset(other.inputs)

    def __hash__(self) -> int:
        return hash(frozenset(self.inputs))

    def __repr__(self) -> str:
        return f"FluidUpdateRequest({self.first!r}, {self.second!r})"


def _create_backend(substance: Substance, service: PropsService) -> PropsBackend:
    if isinstance(substance, CustomMix):
        mix = substance.to_mole_based(service)
        backend = service.create_backend(mix.backend_name, mix.fluid_name)
        backend.set_fractions(mix.fractions, basis="mole")
        return backend
    backend = service.create_backend(substance.backend_name, substance.fluid_name)
    if isinstance(substance, BinaryMix):
        backend.set_fractions([substance.fraction], basis=substance.kind.fraction_basis)
    return backend


def _submit(backend: PropsBackend, request: FluidUpdateRequest) -> None:
    logger.debug("Applying %r", request)
    backend.update(
        request.first.key, request.first.si_value,
        request.second.key, request.second.si_value,
    )


class _FluidBase:
    """Read-only interface shared by undefined and defined fluids."""

    def __init__(
        self,
        substance: Substance,
        backend: PropsBackend,
        trivial_outputs: Dict[FluidTrivialParam, float],
        props_service: PropsService,
    ):
        self._substance = substance
        self._backend: Optional[PropsBackend] = backend
        self._trivial_outputs = trivial_outputs
        self._props_service = props_service

    @property
    def substance(self) -> Substance:
        return self._substance

    def _require_backend(self) -> PropsBackend:
        if self._backend is None:
            raise StateConsumedError(
                "This undefined fluid was consumed by update(); use the returned Fluid"
            )
        return self._backend

    def trivial_output(self, param: FluidTrivialParam) -> float:
        """
        Composition-independent output, cached for the lifetime of the fluid.

        Args:
            param: Trivial parameter

        Returns:
            Value in SI units

        Raises:
            BackendError: If the backend cannot evaluate the parameter
        """
        backend = self._require_backend()
        if param not in self._trivial_outputs:
            self._trivial_outputs[param] = backend.keyed_output(param)
        return self._trivial_outputs[param]

    # ========== Trivial outputs ==========

    @property
    def molar_mass(self) -> float:
        """Molar mass [kg/mol]."""
        return self.trivial_output(FluidTrivialParam.MOLAR_MASS)

    @property
    def critical_temperature(self) -> float:
        """Critical point temperature [K]."""
        return self.trivial_output(FluidTrivialParam.T_CRITICAL)

    @property
    def critical_pressure(self) -> float:
        """Critical point pressure [Pa]."""
        return self.trivial_output(FluidTrivialParam.P_CRITICAL)

    @property
    def critical_density(self) -> float:
        """Critical point mass density [kg/m³]."""
        return self.trivial_output(FluidTrivialParam.D_MASS_CRITICAL)

    @property
    def triple_temperature(self) -> float:
        """Triple point temperature [K]."""
        return self.trivial_output(FluidTrivialParam.T_TRIPLE)

    @property
    def triple_pressure(self) -> float:
        """Triple point pressure [Pa]."""
        return self.trivial_output(FluidTrivialParam.P_TRIPLE)

    @property
    def min_temperature(self) -> float:
        """Minimum temperature of the equation of state [K]."""
        return self.trivial_output(FluidTrivialParam.T_MIN)

    @property
    def max_temperature(self) -> float:
        """Maximum temperature of the equation of state [K]."""
        return self.trivial_output(FluidTrivialParam.T_MAX)

    @property
    def max_pressure(self) -> float:
        """Maximum pressure of the equation of state [Pa]."""
        return self.trivial_output(FluidTrivialParam.P_MAX)

    @property
    def freezing_temperature(self) -> float:
        """Freezing temperature of incompressible fluids [K]."""
        return self.trivial_output(FluidTrivialParam.T_FREEZE)

    @property
    def min_fraction(self) -> float:
        """Minimum fraction of incompressible mixtures [-]."""
        return self.trivial_output(FluidTrivialParam.MIN_FRACTION)

    @property
    def max_fraction(self) -> float:
        """Maximum fraction of incompressible mixtures [-]."""
        return self.trivial_output(FluidTrivialParam.MAX_FRACTION)


class UndefinedFluid(_FluidBase):
    """
    Fluid without a defined state.

    Call update() to obtain a Fluid; this instance is consumed by a
    successful update and cannot be used afterwards.
    """

    def __init__(self, substance: Substance, props_service: Optional[PropsService] = None):
        """
        Create the backend handle for a substance.

        Args:
            substance: Pure, IncompPure, Refrigerant, PredefinedMix, BinaryMix or CustomMix
            props_service: Source of backend handles (default: the global PropsService)

        Raises:
            TypeError: If substance is not a supported substance kind
            BackendError: If the backend rejects the substance
        """
        if not is_substance(substance):
            raise TypeError(f"Unsupported substance: {substance!r}")
        service = props_service if props_service is not None else get_props_service()
        super().__init__(substance, _create_backend(substance, service), {}, service)

    def update(self, input_a: FluidInput, input_b: FluidInput) -> "Fluid":
        """
        Define the state from two keyed inputs.

        Args:
            input_a: First keyed input
            input_b: Second keyed input, with a different key

        Returns:
            Fluid in the requested state

        Raises:
            InvalidUpdateRequestError: If both inputs have the same key
            BackendError: If the backend rejects the inputs (this instance
                stays usable)
            StateConsumedError: If this instance was already updated
        """
        backend = self._require_backend()
        request = FluidUpdateRequest(input_a, input_b)
        fluid = Fluid._resolve(
            self._substance, backend, request, self._trivial_outputs, self._props_service
        )
        self._backend = None
        return fluid

    def __repr__(self) -> str:
        return f"UndefinedFluid({self._substance})"


class Fluid(_FluidBase):
    """
    Fluid in a defined state.

    Created by UndefinedFluid.update(), in_state() or clone(); the
    constructor is internal. State-dependent outputs are evaluated once per
    state and served from the cache afterwards.
    """

    def __init__(
        self,
        substance: Substance,
        backend: PropsBackend,
        update_request: FluidUpdateRequest,
        trivial_outputs: Dict[FluidTrivialParam, float],
        props_service: PropsService,
        _key: Optional[object] = None,
    ):
        if _key is not _RESOLVE_KEY:
            raise TypeError("Fluid instances are created by UndefinedFluid.update()")
        super().__init__(substance, backend, trivial_outputs, props_service)
        self._update_request = update_request
        self._outputs: Dict[FluidParam, float] = {}

    @classmethod
    def _resolve(
        cls,
        substance: Substance,
        backend: PropsBackend,
        update_request: FluidUpdateRequest,
        trivial_outputs: Dict[FluidTrivialParam, float],
        props_service: PropsService,
    ) -> "Fluid":
        """Apply the request to the backend, then wrap it in a defined fluid."""
        _submit(backend, update_request)
        return cls(
            substance, backend, update_request, trivial_outputs, props_service, _RESOLVE_KEY
        )

    @property
    def update_request(self) -> FluidUpdateRequest:
        """Last successfully applied update request."""
        return self._update_request

    def update(self, input_a: FluidInput, input_b: FluidInput) -> "Fluid":
        """
        Move to a new state.

        All-or-nothing: if the backend rejects the inputs, the previous
        state is applied again and the cached outputs are kept. The
        backend's rejection is raised unchanged, even if the previous state
        cannot be applied again.

        Args:
            input_a: First keyed input
            input_b: Second keyed input, with a different key

        Returns:
            This fluid, in the new state

        Raises:
            InvalidUpdateRequestError: If both inputs have the same key
            BackendError: If the backend rejects the inputs
        """
        request = FluidUpdateRequest(input_a, input_b)
        try:
            _submit(self._backend, request)
        except BackendError as rejection:
            logger.warning("%r rejected, restoring %r", request, self._update_request)
            try:
                _submit(self._backend, self._update_request)
            except BackendError as e:
                logger.error("Could not restore %r: %s", self._update_request, e)
            raise rejection
        self._update_request = request
        self._outputs.clear()
        return self

    def output(self, param: FluidParam) -> float:
        """
        State-dependent output, cached until the next update.

        Args:
            param: Fluid parameter

        Returns:
            Value in SI units

        Raises:
            BackendError: If the backend cannot evaluate the parameter
                (nothing is cached)
        """
        if param in self._outputs:
            return self._outputs[param]
        logger.debug("Cache miss for %s", param.canonical)
        value = self._backend.keyed_output(param)
        self._outputs[param] = value
        return value

    def in_state(self, input_a: FluidInput, input_b: FluidInput) -> "Fluid":
        """
        New, independent fluid of the same substance in another state.

        This fluid is left untouched; trivial outputs already known are
        copied to the new fluid.
        """
        undefined = UndefinedFluid(self._substance, self._props_service)
        undefined._trivial_outputs.update(self._trivial_outputs)
        return undefined.update(input_a, input_b)

    def clone(self) -> "Fluid":
        """
        Independent copy in the same state, with its own backend handle.

        Both caches are copied.
        """
        backend = _create_backend(self._substance, self._props_service)
        fluid = Fluid._resolve(
            self._substance, backend, self._update_request,
            dict(self._trivial_outputs), self._props_service,
        )
        fluid._outputs.update(self._outputs)
        return fluid

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the fluid to a dictionary.

        Useful for serialization, logging, and debugging. Only outputs that
        were already evaluated are included.
        """
        return {
            'substance': self._substance.fluid_name,
            'backend': self._substance.backend_name,
            'inputs': {i.key.canonical: i.si_value for i in self._update_request.inputs},
            'outputs': {p.canonical: v for p, v in self._outputs.items()},
            'trivial_outputs': {p.canonical: v for p, v in self._trivial_outputs.items()},
        }

    def __repr__(self) -> str:
        inputs = ", ".join(
            f"{i.key.canonical}={i.si_value:.6g}" for i in self._update_request.inputs
        )
        return f"Fluid({self._substance.fluid_name}: {inputs})"

    # ========== State-dependent outputs ==========

    @property
    def pressure(self) -> float:
        """Pressure [Pa]."""
        return self.output(FluidParam.P)

    @property
    def temperature(self) -> float:
        """Temperature [K]."""
        return self.output(FluidParam.T)

    @property
    def density(self) -> float:
        """Mass density [kg/m³]."""
        return self.output(FluidParam.D_MASS)

    @property
    def molar_density(self) -> float:
        """Molar density [mol/m³]."""
        return self.output(FluidParam.D_MOLAR)

    @property
    def enthalpy(self) -> float:
        """Mass specific enthalpy [J/kg]."""
        return self.output(FluidParam.H_MASS)

    @property
    def entropy(self) -> float:
        """Mass specific entropy [J/kg/K]."""
        return self.output(FluidParam.S_MASS)

    @property
    def internal_energy(self) -> float:
        """Mass specific internal energy [J/kg]."""
        return self.output(FluidParam.U_MASS)

    @property
    def quality(self) -> float:
        """
        Vapor quality [-].

        Only meaningful in the two-phase region; the backend reports -1
        for single-phase states.
        """
        return self.output(FluidParam.Q)

    @property
    def specific_heat(self) -> float:
        """Mass specific heat at constant pressure [J/kg/K]."""
        return self.output(FluidParam.CP_MASS)

    @property
    def specific_heat_cv(self) -> float:
        """Mass specific heat at constant volume [J/kg/K]."""
        return self.output(FluidParam.CV_MASS)

    @property
    def dynamic_viscosity(self) -> float:
        """Dynamic viscosity [Pa·s]."""
        return self.output(FluidParam.DYN_VISCOSITY)

    @property
    def kinematic_viscosity(self) -> float:
        """Kinematic viscosity [m²/s]."""
        return self.dynamic_viscosity / self.density

    @property
    def conductivity(self) -> float:
        """Thermal conductivity [W/m/K]."""
        return self.output(FluidParam.CONDUCTIVITY)

    @property
    def prandtl(self) -> float:
        """Prandtl number [-]."""
        return self.output(FluidParam.PRANDTL)

    @property
    def sound_speed(self) -> float:
        """Speed of sound [m/s]."""
        return self.output(FluidParam.SOUND_SPEED)

    @property
    def surface_tension(self) -> float:
        """Surface tension [N/m]."""
        return self.output(FluidParam.SURFACE_TENSION)

    @property
    def compressibility(self) -> float:
        """Compressibility factor [-]."""
        return self.output(FluidParam.Z)

    @property
    def phase(self) -> Phase:
        """Phase state, decoded from the backend's numeric phase output."""
        return Phase.from_float(self.output(FluidParam.PHASE))
