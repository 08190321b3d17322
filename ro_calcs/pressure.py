import math
from dataclasses import dataclass

from .constants import (
    R_BAR, KELVIN_OFFSET, VANT_HOFF_FACTOR, OPERATIONAL_MARGIN,
    VISCOSITY_COEFF, REFERENCE_TEMP_C, FOULING_COEFF, TURBIDITY_COEFF,
    PH_COEFF, OPTIMAL_PH, AREA_SCALE_COEFF,
)


class MembraneAreaError(ValueError):
    """Raised when the membrane area is zero, negative or NaN."""


@dataclass(frozen=True)
class PressureBreakdown:
    temperature_K: float
    osmotic: float
    operational: float
    viscosity_adjustment: float
    after_temperature: float
    fouling_penalty: float
    turbidity_penalty: float
    ph_penalty: float
    area_scale: float
    unrounded: float
    predicted: float


def osmotic_pressure(salinity_mol_L, Temp_K):
    """Van 't Hoff osmotic pressure (bar): π = i·M·R·T."""
    return VANT_HOFF_FACTOR * salinity_mol_L * R_BAR * Temp_K


def viscosity_adjustment(Temp_C):
    """Linear de-rating around 25 °C. Above 1 in colder water, below 1 in warmer."""
    return 1 - VISCOSITY_COEFF * (Temp_C - REFERENCE_TEMP_C)


def fouling_penalty(fouling_factor):
    return FOULING_COEFF * fouling_factor


def turbidity_penalty(turbidity_NTU):
    return TURBIDITY_COEFF * turbidity_NTU


def ph_penalty(pH):
    """Symmetric penalty around the optimal pH of 7.75."""
    return PH_COEFF * abs(pH - OPTIMAL_PH)


def area_scaling_factor(membrane_area_m2):
    """Inverse square root scaling: 7 / √A."""
    # catches NaN too
    if not membrane_area_m2 > 0:
        raise MembraneAreaError(
            f"membrane area must be positive, got {membrane_area_m2!r} m²")
    return AREA_SCALE_COEFF / math.sqrt(membrane_area_m2)


def pressure_breakdown(conditions):
    """Run the full pressure pipeline and keep every intermediate value.

    Fouling is added after the area scaling, turbidity and pH before it.
    No bounds are applied to the result.
    """
    area_scale = area_scaling_factor(conditions.membrane_area)

    # 1) osmotic pressure at feed temperature
    T_K = conditions.temperature + KELVIN_OFFSET
    osmotic = osmotic_pressure(conditions.salinity, T_K)

    # 2) operating margin and temperature correction
    operational = osmotic * OPERATIONAL_MARGIN
    visc_adj = viscosity_adjustment(conditions.temperature)
    after_temp = operational * visc_adj

    # 3) additive penalties
    fouling = fouling_penalty(conditions.fouling_factor)
    turbidity = turbidity_penalty(conditions.turbidity)
    pH = ph_penalty(conditions.pH)

    # 4) combine
    total = ((after_temp + turbidity + pH) * area_scale) + fouling

    return PressureBreakdown(
        temperature_K=T_K,
        osmotic=osmotic,
        operational=operational,
        viscosity_adjustment=visc_adj,
        after_temperature=after_temp,
        fouling_penalty=fouling,
        turbidity_penalty=turbidity,
        ph_penalty=pH,
        area_scale=area_scale,
        unrounded=total,
        predicted=round(total, 2),
    )


def predict_minimum_pressure(conditions):
    """Minimum feed pressure (bar) for the given operating conditions."""
    return pressure_breakdown(conditions).predicted
