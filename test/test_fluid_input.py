"""
Unit tests for FluidInput

Each factory must pair the right key with the SI magnitude of its argument.

Author: fluidprops contributors
Date: 2026-10-18
"""

import pint
import pytest

from fluidprops.core.units import Q_
from fluidprops.io import FluidInput, FluidParam


class TestFactories:
    """Test keys and SI values produced by each factory."""

    def test_si_quantities(self):
        """Quantities already in SI units keep their magnitude."""
        cases = [
            (FluidInput.density(Q_(1.0, "kg/m**3")), FluidParam.D_MASS),
            (FluidInput.enthalpy(Q_(1.0, "J/kg")), FluidParam.H_MASS),
            (FluidInput.entropy(Q_(1.0, "J/kg/K")), FluidParam.S_MASS),
            (FluidInput.internal_energy(Q_(1.0, "J/kg")), FluidParam.U_MASS),
            (FluidInput.molar_density(Q_(1.0, "mol/m**3")), FluidParam.D_MOLAR),
            (FluidInput.molar_enthalpy(Q_(1.0, "J/mol")), FluidParam.H_MOLAR),
            (FluidInput.molar_entropy(Q_(1.0, "J/mol/K")), FluidParam.S_MOLAR),
            (FluidInput.molar_internal_energy(Q_(1.0, "J/mol")), FluidParam.U_MOLAR),
            (FluidInput.pressure(Q_(1.0, "Pa")), FluidParam.P),
            (FluidInput.quality(Q_(1.0, "dimensionless")), FluidParam.Q),
            (FluidInput.temperature(Q_(1.0, "K")), FluidParam.T),
        ]
        for sut, expected_key in cases:
            assert sut.key is expected_key
            assert sut.si_value == pytest.approx(1.0)

    def test_unit_conversion(self):
        """Non-SI units are converted to SI."""
        assert FluidInput.pressure(Q_(1.0, "atm")).si_value == pytest.approx(101325.0)
        assert FluidInput.pressure(Q_(1.5, "bar")).si_value == pytest.approx(1.5e5)
        assert FluidInput.temperature(Q_(20.0, "degC")).si_value == pytest.approx(293.15)
        assert FluidInput.density(Q_(1.0, "g/cm**3")).si_value == pytest.approx(1000.0)
        assert FluidInput.enthalpy(Q_(2.5, "kJ/kg")).si_value == pytest.approx(2500.0)
        assert FluidInput.quality(Q_(50.0, "percent")).si_value == pytest.approx(0.5)

    def test_plain_numbers_are_si(self):
        """Plain numbers are taken as SI magnitudes."""
        sut = FluidInput.pressure(101325)
        assert sut.key is FluidParam.P
        assert sut.si_value == 101325.0
        assert isinstance(sut.si_value, float)

    def test_no_range_validation(self):
        """Physically implausible values are accepted (checked by the backend)."""
        assert FluidInput.temperature(-10.0).si_value == -10.0
        assert FluidInput.quality(2.0).si_value == 2.0

    def test_wrong_dimension(self):
        """Quantities of the wrong dimension are rejected by pint."""
        with pytest.raises(pint.DimensionalityError):
            FluidInput.pressure(Q_(300.0, "K"))


class TestValueSemantics:
    """Test equality and hashing."""

    def test_equality_by_key_and_value(self):
        """Inputs are equal only if key and value are equal."""
        assert FluidInput.pressure(1e5) == FluidInput.pressure(Q_(1.0, "bar"))
        assert FluidInput.pressure(1e5) != FluidInput.pressure(2e5)
        assert FluidInput.enthalpy(1.0) != FluidInput.internal_energy(1.0)

    def test_hashable(self):
        """Equal inputs have the same hash."""
        assert len({FluidInput.temperature(300.0), FluidInput.temperature(300.0)}) == 1

    def test_immutable(self):
        """Inputs cannot be modified."""
        sut = FluidInput.temperature(300.0)
        with pytest.raises(AttributeError):
            sut.si_value = 1.0
