"""
Refrigerant - refrigerants evaluated with the HEOS backend

Blends listed here (R404A, R407C, ...) are pseudo-pure fits; only refrigerants
of the PURE category may be used as custom mixture components.

Author: fluidprops contributors
Date: 2026-10-18
"""

from enum import Enum

from fluidprops.substance.base import SubstanceEnum


class RefrigerantCategory(Enum):
    """Refrigerant categories."""

    PURE = "pure"
    ZEOTROPIC_MIX = "zeotropic_mix"
    AZEOTROPIC_MIX = "azeotropic_mix"


class Refrigerant(SubstanceEnum):
    """Refrigerants."""

    R11 = "R11"
    R113 = "R113"
    R114 = "R114"
    R115 = "R115"
    R116 = "R116"
    R12 = "R12"
    R123 = "R123"
    R1233ZD_E = "R1233zd(E)"
    R1234YF = "R1234yf"
    R1234ZE_E = "R1234ze(E)"
    R1234ZE_Z = "R1234ze(Z)"
    R124 = "R124"
    R1243ZF = "R1243zf"
    R125 = "R125"
    R13 = "R13"
    R134A = "R134a"
    R13I1 = "R13I1"
    R14 = "R14"
    R141B = "R141b"
    R142B = "R142b"
    R143A = "R143a"
    R152A = "R152A"
    R161 = "R161"
    R21 = "R21"
    R218 = "R218"
    R22 = "R22"
    R227EA = "R227EA"
    R23 = "R23"
    R236EA = "R236EA"
    R236FA = "R236FA"
    R245CA = "R245ca"
    R245FA = "R245fa"
    R32 = "R32"
    R365MFC = "R365MFC"
    R40 = "R40"
    R404A = "R404A"
    R407C = "R407C"
    R41 = "R41"
    R410A = "R410A"
    R507A = "R507A"
    RC318 = "RC318"
    SES36 = "SES36"

    @property
    def backend_name(self) -> str:
        return "HEOS"

    @property
    def category(self) -> RefrigerantCategory:
        """Whether the refrigerant is a pure substance or a blend."""
        return _BLEND_CATEGORIES.get(self, RefrigerantCategory.PURE)


_BLEND_CATEGORIES = {
    Refrigerant.R404A: RefrigerantCategory.ZEOTROPIC_MIX,
    Refrigerant.R407C: RefrigerantCategory.ZEOTROPIC_MIX,
    Refrigerant.R410A: RefrigerantCategory.ZEOTROPIC_MIX,
    Refrigerant.R507A: RefrigerantCategory.AZEOTROPIC_MIX,
    Refrigerant.SES36: RefrigerantCategory.AZEOTROPIC_MIX,
}
