"""
Humid air parameters - keys of psychrometric properties

Canonical names are the HAPropsSI keys. Codes are local to this registry and
must not be mixed with FluidParam codes.

Author: fluidprops contributors
Date: 2026-10-18
"""

from fluidprops.io.keys import KeyRegistry


class HumidAirParam(KeyRegistry):
    """Humid air parameters."""

    T_WET_BULB = 0, "B", "Twb", "T_wb", "WetBulb"
    CP_DRY_AIR = 1, "C", "cp"
    CP_HUMID_AIR = 2, "Cha", "cp_ha"
    CV_DRY_AIR = 3, "CV"
    CV_HUMID_AIR = 4, "CVha", "cv_ha"
    T_DEW_POINT = 5, "D", "Tdp", "DewPoint", "T_dp"
    ENTHALPY_DRY_AIR = 6, "H", "Hda", "Enthalpy"
    ENTHALPY_HUMID_AIR = 7, "Hha"
    CONDUCTIVITY = 8, "K", "Conductivity"
    DYN_VISCOSITY = 9, "M", "Visc", "mu"
    PRESSURE = 10, "P"
    PARTIAL_PRESSURE = 11, "P_w"
    RELATIVE_HUMIDITY = 12, "R", "RH", "RelHum"
    ENTROPY_DRY_AIR = 13, "S", "Sda", "Entropy"
    ENTROPY_HUMID_AIR = 14, "Sha"
    T_DRY_BULB = 15, "T", "Tdb", "T_db"
    VOLUME_DRY_AIR = 16, "V", "Vda"
    VOLUME_HUMID_AIR = 17, "Vha"
    HUMIDITY_RATIO = 18, "W", "Omega", "HumRat"
    WATER_MOLE_FRACTION = 19, "Y", "psi_w"
    COMPRESSIBILITY = 20, "Z"
