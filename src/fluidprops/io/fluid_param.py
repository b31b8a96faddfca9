"""
Fluid parameters - keys of fluid and mixture properties

Codes follow the layout of CoolProp's ``parameters`` enumeration and are
listed explicitly; canonical names are the CoolProp parameter strings.

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.io.keys import KeyRegistry


class FluidParam(KeyRegistry):
    """Fluid parameters (inputs and outputs of a fluid state)."""

    # General parameters
    GAS_CONSTANT = 1, "gas_constant"
    MOLAR_MASS = 2, "molar_mass", "M", "molarmass", "molemass"
    ACENTRIC_FACTOR = 3, "acentric", "acentric_factor"
    D_MOLAR_REDUCING = 4, "rhomolar_reducing"
    D_MOLAR_CRITICAL = 5, "rhomolar_critical"
    T_REDUCING = 6, "T_reducing"
    T_CRITICAL = 7, "T_critical", "Tcrit"
    D_MASS_REDUCING = 8, "rhomass_reducing"
    D_MASS_CRITICAL = 9, "rhomass_critical", "rhocrit"
    P_CRITICAL = 10, "p_critical", "pcrit"
    P_REDUCING = 11, "p_reducing"
    T_TRIPLE = 12, "T_triple", "Ttriple"
    P_TRIPLE = 13, "p_triple", "ptriple"
    T_MIN = 14, "T_min", "Tmin"
    T_MAX = 15, "T_max", "Tmax"
    P_MAX = 16, "P_max", "pmax"
    P_MIN = 17, "P_min", "pmin"
    DIPOLE_MOMENT = 18, "dipole_moment"

    # Bulk properties
    T = 19, "T", "temperature"
    P = 20, "P", "pressure"
    Q = 21, "Q", "quality"
    TAU = 22, "Tau"
    DELTA = 23, "Delta"

    # Molar specific properties
    D_MOLAR = 24, "Dmolar", "rhomolar"
    H_MOLAR = 25, "Hmolar"
    S_MOLAR = 26, "Smolar"
    CP_MOLAR = 27, "Cpmolar"
    CP0_MOLAR = 28, "Cp0molar"
    CV_MOLAR = 29, "Cvmolar"
    U_MOLAR = 30, "Umolar"
    G_MOLAR = 31, "Gmolar"
    HELMHOLTZ_MOLAR = 32, "Helmholtzmolar"
    H_MOLAR_RESIDUAL = 33, "Hmolar_residual"
    S_MOLAR_RESIDUAL = 34, "Smolar_residual"
    G_MOLAR_RESIDUAL = 35, "Gmolar_residual"

    # Mass specific properties
    D_MASS = 36, "Dmass", "D", "rhomass", "density"
    H_MASS = 37, "Hmass", "H", "enthalpy"
    S_MASS = 38, "Smass", "S", "entropy"
    CP_MASS = 39, "Cpmass", "C"
    CP0_MASS = 40, "Cp0mass"
    CV_MASS = 41, "Cvmass", "O"
    U_MASS = 42, "Umass", "U", "internal_energy"
    G_MASS = 43, "Gmass", "G"
    HELMHOLTZ_MASS = 44, "Helmholtzmass"

    # Transport properties
    DYN_VISCOSITY = 45, "viscosity", "V", "mu"
    CONDUCTIVITY = 46, "conductivity", "L"
    SURFACE_TENSION = 47, "surface_tension", "I"
    PRANDTL = 48, "Prandtl"

    # Derivative-based properties
    SOUND_SPEED = 49, "speed_of_sound", "A", "speed_sound"
    ISOTHERMAL_COMPRESSIBILITY = 50, "isothermal_compressibility"
    ISOBARIC_EXPANSION_COEFFICIENT = 51, "isobaric_expansion_coefficient"
    ISENTROPIC_EXPANSION_COEFFICIENT = 52, "isentropic_expansion_coefficient"
    FUNDAMENTAL_DERIVATIVE_OF_GAS_DYNAMICS = 53, "fundamental_derivative_of_gas_dynamics"

    # Helmholtz energy terms
    ALPHA_R = 54, "alphar"
    D_ALPHA_R_D_TAU_CONST_DELTA = 55, "dalphar_dtau_constdelta"
    D_ALPHA_R_D_DELTA_CONST_TAU = 56, "dalphar_ddelta_consttau"
    ALPHA0 = 57, "alpha0"
    D_ALPHA0_D_TAU_CONST_DELTA = 58, "dalpha0_dtau_constdelta"
    D_ALPHA0_D_DELTA_CONST_TAU = 59, "dalpha0_ddelta_consttau"
    D2_ALPHA0_D_DELTA2_CONST_TAU = 60, "d2alpha0_ddelta2_consttau"
    D3_ALPHA0_D_DELTA3_CONST_TAU = 61, "d3alpha0_ddelta3_consttau"

    # Virial coefficients and other functions
    B_VIRIAL = 62, "Bvirial"
    C_VIRIAL = 63, "Cvirial"
    D_B_VIRIAL_D_T = 64, "dBvirial_dT"
    D_C_VIRIAL_D_T = 65, "dCvirial_dT"
    Z = 66, "Z", "compressibility_factor"
    PIP = 67, "PIP"

    # Incompressibles
    MIN_FRACTION = 68, "fraction_min"
    MAX_FRACTION = 69, "fraction_max"
    T_FREEZE = 70, "T_freeze"

    # Environmental indices
    GWP20 = 71, "GWP20"
    GWP100 = 72, "GWP100"
    GWP500 = 73, "GWP500"
    FH = 74, "FH"
    HH = 75, "HH"
    PH = 76, "PH"
    ODP = 77, "ODP"

    PHASE = 78, "Phase"


class FluidTrivialParam(KeyRegistry):
    """
    Composition-independent fluid parameters.

    These do not depend on the fluid state, so they can be queried before
    any update. Codes match the corresponding FluidParam codes.
    """

    GAS_CONSTANT = 1, "gas_constant"
    MOLAR_MASS = 2, "molar_mass", "M", "molarmass", "molemass"
    ACENTRIC_FACTOR = 3, "acentric", "acentric_factor"
    D_MOLAR_REDUCING = 4, "rhomolar_reducing"
    D_MOLAR_CRITICAL = 5, "rhomolar_critical"
    T_REDUCING = 6, "T_reducing"
    T_CRITICAL = 7, "T_critical", "Tcrit"
    D_MASS_REDUCING = 8, "rhomass_reducing"
    D_MASS_CRITICAL = 9, "rhomass_critical", "rhocrit"
    P_CRITICAL = 10, "p_critical", "pcrit"
    P_REDUCING = 11, "p_reducing"
    T_TRIPLE = 12, "T_triple", "Ttriple"
    P_TRIPLE = 13, "p_triple", "ptriple"
    T_MIN = 14, "T_min", "Tmin"
    T_MAX = 15, "T_max", "Tmax"
    P_MAX = 16, "P_max", "pmax"
    P_MIN = 17, "P_min", "pmin"
    DIPOLE_MOMENT = 18, "dipole_moment"
    MIN_FRACTION = 68, "fraction_min"
    MAX_FRACTION = 69, "fraction_max"
    T_FREEZE = 70, "T_freeze"
    GWP20 = 71, "GWP20"
    GWP100 = 72, "GWP100"
    GWP500 = 73, "GWP500"
    FH = 74, "FH"
    HH = 75, "HH"
    PH = 76, "PH"
    ODP = 77, "ODP"

    def to_fluid_param(self) -> FluidParam:
        """Same key in the FluidParam code space."""
        return FluidParam.from_code(self.code)
