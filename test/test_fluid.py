"""
Unit tests for UndefinedFluid / Fluid

Uses the call-recording stub backend to check the state lifecycle, output
caching and the all-or-nothing update.

Author: fluidprops contributors
Date: 2026-10-18
"""

import pytest

from fluidprops.core.errors import BackendError, InvalidUpdateRequestError, StateConsumedError
from fluidprops.core.fluid import Fluid, FluidUpdateRequest, UndefinedFluid
from fluidprops.io import FluidInput, FluidParam, FluidTrivialParam, Phase
from fluidprops.substance import BinaryMix, BinaryMixKind, CustomMix, Pure, Refrigerant


@pytest.fixture
def undefined(stub_service):
    """Undefined water fluid on the stub backend."""
    return UndefinedFluid(Pure.WATER, stub_service)


@pytest.fixture
def fluid(undefined):
    """Water at 1 atm and 20 °C on the stub backend."""
    return undefined.update(FluidInput.pressure(101325.0), FluidInput.temperature(293.15))


class TestUpdateRequest:
    """Test FluidUpdateRequest."""

    def test_same_key_rejected(self):
        """Two inputs with the same key are rejected."""
        with pytest.raises(InvalidUpdateRequestError):
            FluidUpdateRequest(FluidInput.pressure(1e5), FluidInput.pressure(2e5))

    def test_unordered(self):
        """The order of the inputs does not matter."""
        p, t = FluidInput.pressure(1e5), FluidInput.temperature(300.0)
        assert FluidUpdateRequest(p, t) == FluidUpdateRequest(t, p)
        assert hash(FluidUpdateRequest(p, t)) == hash(FluidUpdateRequest(t, p))
        assert FluidUpdateRequest(p, t) != FluidUpdateRequest(p, FluidInput.temperature(301.0))


class TestUndefinedFluid:
    """Test the undefined state."""

    def test_unsupported_substance(self, stub_service):
        """Only substance kinds are accepted."""
        with pytest.raises(TypeError):
            UndefinedFluid("Water", stub_service)

    def test_fluid_not_constructible_directly(self, stub_service):
        """A defined fluid can only come from an update."""
        backend = stub_service.create_backend("HEOS", "Water")
        request = FluidUpdateRequest(FluidInput.pressure(1e5), FluidInput.temperature(300.0))
        with pytest.raises(TypeError):
            Fluid(Pure.WATER, backend, request, {}, stub_service)
        assert backend.update_calls == []

    def test_trivial_outputs(self, undefined, stub_service):
        """Trivial outputs are available without a state and cached."""
        assert undefined.critical_temperature == pytest.approx(647.096)
        assert undefined.critical_pressure == pytest.approx(22.064e6)
        assert undefined.molar_mass == pytest.approx(0.018015268)
        assert undefined.critical_temperature == pytest.approx(647.096)
        assert stub_service.last.output_calls.count(FluidTrivialParam.T_CRITICAL) == 1

    def test_trivial_output_error(self, undefined):
        """Unsupported trivial outputs raise BackendError."""
        with pytest.raises(BackendError):
            undefined.triple_temperature

    def test_update_returns_fluid(self, undefined):
        """A successful update returns a defined fluid."""
        result = undefined.update(FluidInput.pressure(101325.0), FluidInput.temperature(293.15))
        assert isinstance(result, Fluid)
        assert result.substance is Pure.WATER
        assert result.update_request == FluidUpdateRequest(
            FluidInput.temperature(293.15), FluidInput.pressure(101325.0)
        )

    def test_consumed_after_update(self, undefined):
        """The undefined fluid cannot be used after a successful update."""
        undefined.update(FluidInput.pressure(101325.0), FluidInput.temperature(293.15))
        with pytest.raises(StateConsumedError):
            undefined.update(FluidInput.pressure(2e5), FluidInput.temperature(300.0))
        with pytest.raises(StateConsumedError):
            undefined.molar_mass

    def test_usable_after_rejected_update(self, undefined, stub_service):
        """A rejected update leaves the undefined fluid usable."""
        with pytest.raises(BackendError):
            undefined.update(FluidInput.pressure(-1.0), FluidInput.temperature(293.15))
        result = undefined.update(FluidInput.pressure(101325.0), FluidInput.temperature(293.15))
        assert result.pressure == 101325.0
        assert len(stub_service.backends) == 1

    def test_duplicate_keys_never_reach_backend(self, undefined, stub_service):
        """Same-key inputs fail before any backend call."""
        with pytest.raises(InvalidUpdateRequestError):
            undefined.update(FluidInput.temperature(300.0), FluidInput.temperature(310.0))
        assert stub_service.last.update_calls == []

    def test_trivial_cache_carried_over(self, undefined, stub_service):
        """Trivial outputs evaluated before the update are not evaluated again."""
        undefined.critical_temperature
        result = undefined.update(FluidInput.pressure(101325.0), FluidInput.temperature(293.15))
        assert result.critical_temperature == pytest.approx(647.096)
        assert stub_service.last.output_calls.count(FluidTrivialParam.T_CRITICAL) == 1


class TestOutputs:
    """Test state-dependent outputs and their cache."""

    def test_input_keys(self, fluid):
        """Outputs for the input keys return the inputs."""
        assert fluid.pressure == 101325.0
        assert fluid.temperature == 293.15

    def test_cached(self, fluid, stub_service):
        """A second query does not reach the backend."""
        first = fluid.density
        second = fluid.density
        assert first == second
        assert stub_service.last.output_calls.count(FluidParam.D_MASS) == 1

    def test_cache_cleared_by_update(self, fluid, stub_service):
        """Outputs are evaluated again after a successful update."""
        before = fluid.density
        result = fluid.update(FluidInput.pressure(2e5), FluidInput.temperature(300.0))
        after = fluid.density
        assert result is fluid
        assert after != before
        assert stub_service.last.output_calls.count(FluidParam.D_MASS) == 2

    def test_error_not_cached(self, fluid, stub_service):
        """Failed outputs are retried on the next query."""
        for _ in range(2):
            with pytest.raises(BackendError):
                fluid.surface_tension
        assert stub_service.last.output_calls.count(FluidParam.SURFACE_TENSION) == 2

    def test_derived_outputs(self, fluid):
        """Kinematic viscosity is dynamic viscosity over density."""
        assert fluid.kinematic_viscosity == pytest.approx(fluid.dynamic_viscosity / fluid.density)

    def test_phase(self, fluid):
        """The numeric phase output is truncated and decoded."""
        assert fluid.phase is Phase.GAS
        assert fluid.output(FluidParam.PHASE) == 5.9


class TestFailedUpdate:
    """Test the all-or-nothing update of a defined fluid."""

    def test_state_restored(self, fluid, stub_service):
        """A rejected update keeps the previous request and cache."""
        density = fluid.density
        previous = fluid.update_request
        with pytest.raises(BackendError):
            fluid.update(FluidInput.pressure(-1.0), FluidInput.temperature(300.0))
        assert fluid.update_request == previous
        assert fluid.density == density
        assert stub_service.last.output_calls.count(FluidParam.D_MASS) == 1

    def test_backend_reapplied(self, fluid, stub_service):
        """The previous inputs are applied to the backend again."""
        with pytest.raises(BackendError):
            fluid.update(FluidInput.pressure(-1.0), FluidInput.temperature(300.0))
        calls = stub_service.last.update_calls
        assert len(calls) == 3
        assert calls[-1] == calls[0]
        assert fluid.output(FluidParam.H_MASS) == pytest.approx(37 + 101325.0 + 293.15)

    def test_original_error_when_restore_fails(self, fluid, stub_service):
        """If the previous state cannot be applied again, the rejection still surfaces."""
        density = fluid.density
        previous = fluid.update_request
        stub_service.last.sticky_failure = True
        with pytest.raises(BackendError, match="negative"):
            fluid.update(FluidInput.pressure(-1.0), FluidInput.temperature(300.0))
        assert len(stub_service.last.update_calls) == 3
        assert fluid.update_request == previous
        assert fluid.density == density

    def test_duplicate_keys(self, fluid, stub_service):
        """Same-key inputs fail without touching the backend."""
        with pytest.raises(InvalidUpdateRequestError):
            fluid.update(FluidInput.density(1.0), FluidInput.density(2.0))
        assert len(stub_service.last.update_calls) == 1


class TestMixtures:
    """Test backend setup for mixtures."""

    def test_binary_mix_mass_based(self, stub_service):
        """Mass-based binary mixtures set mass fractions."""
        UndefinedFluid(BinaryMix(BinaryMixKind.MPG, 0.4), stub_service)
        backend = stub_service.last
        assert (backend.backend_name, backend.fluid_name) == ("INCOMP", "MPG")
        assert backend.fractions == ([0.4], "mass")

    def test_binary_mix_volume_based(self, stub_service):
        """Volume-based binary mixtures set volume fractions."""
        UndefinedFluid(BinaryMix(BinaryMixKind.VMA, 0.5), stub_service)
        assert stub_service.last.fractions == ([0.5], "volume")

    def test_custom_mix(self, stub_service):
        """Mass-based custom mixtures are converted to mole fractions."""
        mix = CustomMix.mass_based({Refrigerant.R32: 0.5, Refrigerant.R125: 0.5})
        UndefinedFluid(mix, stub_service)
        backend = stub_service.last
        assert (backend.backend_name, backend.fluid_name) == ("HEOS", "R32&R125")
        fractions, basis = backend.fractions
        assert basis == "mole"
        assert fractions == pytest.approx([0.6976146993758624, 0.30238530062413754], rel=1e-4)

    def test_pure_has_no_fractions(self, undefined, stub_service):
        """Pure substances do not set fractions."""
        assert stub_service.last.fractions is None


class TestCopies:
    """Test clone, in_state and to_dict."""

    def test_clone(self, fluid, stub_service):
        """A clone has its own backend in the same state and the same cache."""
        density = fluid.density
        copy = fluid.clone()
        assert len(stub_service.backends) == 2
        assert copy.update_request == fluid.update_request
        assert copy.density == density
        assert stub_service.last.output_calls == []
        copy.update(FluidInput.pressure(2e5), FluidInput.temperature(300.0))
        assert fluid.pressure == 101325.0
        assert copy.pressure == 2e5

    def test_in_state(self, fluid, stub_service):
        """in_state leaves the original fluid untouched."""
        fluid.critical_temperature
        other = fluid.in_state(FluidInput.pressure(2e5), FluidInput.quality(1.0))
        assert other is not fluid
        assert other.pressure == 2e5
        assert fluid.pressure == 101325.0
        assert other.critical_temperature == pytest.approx(647.096)
        assert FluidTrivialParam.T_CRITICAL not in stub_service.last.output_calls

    def test_to_dict(self, fluid):
        """to_dict reports inputs and evaluated outputs."""
        fluid.density
        fluid.molar_mass
        result = fluid.to_dict()
        assert result['substance'] == "Water"
        assert result['backend'] == "HEOS"
        assert result['inputs'] == {"P": 101325.0, "T": 293.15}
        assert set(result['outputs']) == {"Dmass"}
        assert result['trivial_outputs'] == {"molar_mass": pytest.approx(0.018015268)}

    def test_repr(self, fluid):
        """repr shows the substance and the inputs."""
        assert repr(fluid) == "Fluid(Water: P=101325, T=293.15)"
