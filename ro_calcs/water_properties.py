import logging

from CoolProp.CoolProp import AbstractState, PT_INPUTS

from .constants import KELVIN_OFFSET, REFERENCE_TEMP_C

logger = logging.getLogger(__name__)


def water_viscosity_cP(Temp_C, pressure_bar=1.01325):
    """Dynamic viscosity of pure water (cP) from CoolProp's HEOS backend.

    CoolProp raises ValueError for states it cannot evaluate, e.g. ice.
    """
    AS = AbstractState("HEOS", "Water")
    AS.update(PT_INPUTS, pressure_bar * 1e5, Temp_C + KELVIN_OFFSET)
    # Pa·s → cP
    return AS.viscosity() * 1000.0


def relative_viscosity(Temp_C):
    """μ(T) / μ(25 °C), or None where CoolProp has no water state.

    Display only. Compare with pressure.viscosity_adjustment.
    """
    try:
        mu = water_viscosity_cP(Temp_C)
    except ValueError as exc:
        logger.debug("No reference viscosity at %s °C: %s", Temp_C, exc)
        return None
    return mu / water_viscosity_cP(REFERENCE_TEMP_C)
