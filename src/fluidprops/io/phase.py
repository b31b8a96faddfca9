"""
Phase - phase states of fluids and mixtures

Codes match CoolProp's ``phases`` enumeration. The backend reports the phase
as a floating-point output, decoded with Phase.from_float.

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.io.keys import KeyRegistry


class Phase(KeyRegistry):
    """Phase states."""

    # P < Pc, T < Tc, above saturation
    LIQUID = 0, "phase_liquid", "liquid"
    # P > Pc, T > Tc
    SUPERCRITICAL = 1, "phase_supercritical", "supercritical"
    # P < Pc, T > Tc
    SUPERCRITICAL_GAS = 2, "phase_supercritical_gas", "supercritical_gas", "SupercriticalGas"
    # P > Pc, T < Tc
    SUPERCRITICAL_LIQUID = 3, "phase_supercritical_liquid", "supercritical_liquid", "SupercriticalLiquid"
    CRITICAL_POINT = 4, "phase_critical_point", "critical_point", "CriticalPoint"
    # P < Pc, T < Tc, below saturation
    GAS = 5, "phase_gas", "gas"
    TWO_PHASE = 6, "phase_twophase", "phase_two_phase", "two_phase", "TwoPhase"
    UNKNOWN = 7, "phase_unknown", "unknown"
    # Let the backend determine the phase
    NOT_IMPOSED = 8, "phase_not_imposed", "not_imposed", "NotImposed"
