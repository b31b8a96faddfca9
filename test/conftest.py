"""
Shared fixtures: deterministic stub backend with call recording

The stub stands in for CoolProp so that caching and lifecycle tests can count
backend calls. Values are simple functions of the applied inputs.

Author: fluidprops contributors
Date: 2026-10-18
"""

import pytest

from fluidprops.core.errors import BackendError
from fluidprops.core.props_service import PropsBackend
from fluidprops.io.fluid_param import FluidParam, FluidTrivialParam

# Molar masses [kg/mol]
MOLAR_MASSES = {
    "Water": 0.018015268,
    "Ethanol": 0.04606844,
    "R32": 0.052024,
    "R125": 0.1200214,
}

TRIVIAL_VALUES = {
    FluidTrivialParam.T_CRITICAL: 647.096,
    FluidTrivialParam.P_CRITICAL: 22.064e6,
}


class StubBackend(PropsBackend):
    """
    Call-recording backend.

    - update() rejects negative values and records every call
    - keyed_output() returns an input value when asked for an input key,
      a phase code of 5.9 for PHASE, and code + sum of inputs otherwise
    - SURFACE_TENSION is never supported
    - with sticky_failure set, every update after a rejection fails too
    """

    def __init__(self, backend_name, fluid_name):
        self.backend_name = backend_name
        self.fluid_name = fluid_name
        self.fractions = None
        self.inputs = None
        self.update_calls = []
        self.output_calls = []
        self.sticky_failure = False
        self._failed = False

    def set_fractions(self, fractions, basis="mole"):
        self.fractions = (list(fractions), basis)

    def update(self, key_a, value_a, key_b, value_b):
        self.update_calls.append((key_a, value_a, key_b, value_b))
        if self.sticky_failure and self._failed:
            raise BackendError("Stub lost its state after a rejection")
        if value_a < 0 or value_b < 0:
            self.inputs = None
            self._failed = True
            raise BackendError(f"Stub rejects negative inputs: {value_a}, {value_b}")
        self.inputs = {key_a: value_a, key_b: value_b}

    def keyed_output(self, key):
        self.output_calls.append(key)
        if isinstance(key, FluidTrivialParam):
            return self._trivial(key)
        if self.inputs is None:
            raise BackendError("Stub has no state")
        if key is FluidParam.SURFACE_TENSION:
            raise BackendError("Stub does not support surface tension")
        if key in self.inputs:
            return self.inputs[key]
        if key is FluidParam.PHASE:
            return 5.9
        return float(key.code) + sum(self.inputs.values())

    def _trivial(self, key):
        if key is FluidTrivialParam.MOLAR_MASS:
            names = self.fluid_name.split("&")
            if len(names) == 1 and names[0] in MOLAR_MASSES:
                return MOLAR_MASSES[names[0]]
            return sum(MOLAR_MASSES[n] for n in names) / len(names)
        if key in TRIVIAL_VALUES:
            return TRIVIAL_VALUES[key]
        raise BackendError(f"Stub does not support {key.canonical}")


class StubService:
    """PropsService replacement creating StubBackend handles."""

    def __init__(self):
        self.backends = []

    def create_backend(self, backend_name, fluid_name):
        backend = StubBackend(backend_name, fluid_name)
        self.backends.append(backend)
        return backend

    @property
    def last(self):
        return self.backends[-1]


@pytest.fixture
def stub_service():
    """Fixture providing a fresh StubService."""
    return StubService()
