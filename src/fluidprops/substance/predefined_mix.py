"""
PredefinedMix - mixtures with fixed composition shipped with the backend

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.substance.base import SubstanceEnum


class PredefinedMix(SubstanceEnum):
    """Predefined mixtures (HEOS backend, ``.mix`` definitions)."""

    AIR = "Air.mix"
    AMARILLO = "Amarillo.mix"
    EKOFISK = "Ekofisk.mix"
    GULF_COAST = "GulfCoast.mix"
    GULF_COAST_GAS = "GulfCoastGas(NIST1).mix"
    HIGH_CO2 = "HighCO2.mix"
    HIGH_N2 = "HighN2.mix"
    NATURAL_GAS_SAMPLE = "NaturalGasSample.mix"
    TYPICAL_NATURAL_GAS = "TypicalNaturalGas.mix"
    R401A = "R401A.mix"
    R401B = "R401B.mix"
    R402A = "R402A.mix"
    R404A = "R404A.mix"
    R407A = "R407A.mix"
    R407C = "R407C.mix"
    R407F = "R407F.mix"
    R408A = "R408A.mix"
    R409A = "R409A.mix"
    R410A = "R410A.mix"
    R413A = "R413A.mix"
    R417A = "R417A.mix"
    R422A = "R422A.mix"
    R422D = "R422D.mix"
    R427A = "R427A.mix"
    R438A = "R438A.mix"
    R444A = "R444A.mix"
    R444B = "R444B.mix"
    R448A = "R448A.mix"
    R449A = "R449A.mix"
    R450A = "R450A.mix"
    R452A = "R452A.mix"
    R454B = "R454B.mix"
    R500 = "R500.mix"
    R502 = "R502.mix"
    R507A = "R507A.mix"
    R513A = "R513A.mix"

    @property
    def backend_name(self) -> str:
        return "HEOS"
