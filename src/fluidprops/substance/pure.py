"""
Pure - pure and pseudo-pure substances evaluated with the HEOS backend

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.substance.base import SubstanceEnum


class Pure(SubstanceEnum):
    """Pure or pseudo-pure substances."""

    ONE_BUTENE = "1-Butene"
    ACETONE = "Acetone"
    AIR = "Air"
    AMMONIA = "Ammonia"
    ARGON = "Argon"
    BENZENE = "Benzene"
    CARBON_DIOXIDE = "CarbonDioxide"
    CARBON_MONOXIDE = "CarbonMonoxide"
    CARBONYL_SULFIDE = "CarbonylSulfide"
    CIS_2_BUTENE = "cis-2-Butene"
    CYCLOHEXANE = "CycloHexane"
    CYCLOPENTANE = "Cyclopentane"
    CYCLOPROPANE = "CycloPropane"
    D4 = "D4"
    D5 = "D5"
    D6 = "D6"
    DEUTERIUM = "Deuterium"
    DICHLOROETHANE = "Dichloroethane"
    DIETHYL_ETHER = "DiethylEther"
    DIMETHYL_CARBONATE = "DimethylCarbonate"
    DIMETHYL_ETHER = "DimethylEther"
    ETHANE = "Ethane"
    ETHANOL = "Ethanol"
    ETHYLBENZENE = "EthylBenzene"
    ETHYLENE = "Ethylene"
    ETHYLENE_OXIDE = "EthyleneOxide"
    FLUORINE = "Fluorine"
    HFE143M = "HFE143m"
    HEAVY_WATER = "HeavyWater"
    HELIUM = "Helium"
    HYDROGEN = "Hydrogen"
    HYDROGEN_CHLORIDE = "HydrogenChloride"
    HYDROGEN_SULFIDE = "HydrogenSulfide"
    ISOBUTANE = "IsoButane"
    ISOBUTENE = "IsoButene"
    ISOHEXANE = "Isohexane"
    ISOPENTANE = "Isopentane"
    KRYPTON = "Krypton"
    M_XYLENE = "m-Xylene"
    MD2M = "MD2M"
    MD3M = "MD3M"
    MD4M = "MD4M"
    MDM = "MDM"
    METHANE = "Methane"
    METHANOL = "Methanol"
    METHYL_LINOLEATE = "MethylLinoleate"
    METHYL_LINOLENATE = "MethylLinolenate"
    METHYL_OLEATE = "MethylOleate"
    METHYL_PALMITATE = "MethylPalmitate"
    METHYL_STEARATE = "MethylStearate"
    MM = "MM"
    N_BUTANE = "n-Butane"
    N_DECANE = "n-Decane"
    N_DODECANE = "n-Dodecane"
    N_HEPTANE = "n-Heptane"
    N_HEXANE = "n-Hexane"
    N_NONANE = "n-Nonane"
    N_OCTANE = "n-Octane"
    N_PENTANE = "n-Pentane"
    N_PROPANE = "n-Propane"
    N_UNDECANE = "n-Undecane"
    NEON = "Neon"
    NEOPENTANE = "Neopentane"
    NITROGEN = "Nitrogen"
    NITROUS_OXIDE = "NitrousOxide"
    NOVEC649 = "Novec649"
    O_XYLENE = "o-Xylene"
    ORTHO_DEUTERIUM = "OrthoDeuterium"
    ORTHO_HYDROGEN = "OrthoHydrogen"
    OXYGEN = "Oxygen"
    P_XYLENE = "p-Xylene"
    PARA_DEUTERIUM = "ParaDeuterium"
    PARA_HYDROGEN = "ParaHydrogen"
    PROPYLENE = "Propylene"
    PROPYNE = "Propyne"
    SULFUR_DIOXIDE = "SulfurDioxide"
    SULFUR_HEXAFLUORIDE = "SulfurHexafluoride"
    TOLUENE = "Toluene"
    TRANS_2_BUTENE = "trans-2-Butene"
    WATER = "Water"
    XENON = "Xenon"

    @property
    def backend_name(self) -> str:
        return "HEOS"
