"""
IncompPure - incompressible pure substances (INCOMP backend)

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.substance.base import SubstanceEnum


class IncompPure(SubstanceEnum):
    """Incompressible pure substances (heat transfer fluids, oils, brines)."""

    AS10 = "AS10"
    AS20 = "AS20"
    AS30 = "AS30"
    AS40 = "AS40"
    AS55 = "AS55"
    DEB = "DEB"
    DOW_J = "DowJ"
    DOW_J2 = "DowJ2"
    DOW_Q = "DowQ"
    DOW_Q2 = "DowQ2"
    HC10 = "HC10"
    HC20 = "HC20"
    HC30 = "HC30"
    HC40 = "HC40"
    HC50 = "HC50"
    HCB = "HCB"
    HCM = "HCM"
    HFE = "HFE"
    HFE2 = "HFE2"
    NAK = "NaK"
    NBS = "NBS"
    PBB = "PBB"
    PCL = "PCL"
    PCR = "PCR"
    PGLT = "PGLT"
    PHE = "PHE"
    PHR = "PHR"
    PLR = "PLR"
    PMR = "PMR"
    PMS1 = "PMS1"
    PMS2 = "PMS2"
    PNF = "PNF"
    PNF2 = "PNF2"
    S800 = "S800"
    SAB = "SAB"
    T66 = "T66"
    T72 = "T72"
    TCO = "TCO"
    TD12 = "TD12"
    TVP1 = "TVP1"
    TVP1869 = "TVP1869"
    TX22 = "TX22"
    TY10 = "TY10"
    TY15 = "TY15"
    TY20 = "TY20"
    TY24 = "TY24"
    WATER = "Water"
    XLT = "XLT"
    XLT2 = "XLT2"
    ZS10 = "ZS10"
    ZS25 = "ZS25"
    ZS40 = "ZS40"
    ZS45 = "ZS45"
    ZS55 = "ZS55"

    @property
    def backend_name(self) -> str:
        return "INCOMP"
