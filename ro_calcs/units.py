PSI_PER_BAR = 14.5038
TEMPERATURE_UNITS = ('°C', '°F')


def temperature_to_celsius(value, unit):
    """Convert a °C or °F reading to °C."""
    if unit == '°C':
        return value
    if unit == '°F':
        return (value - 32.0) / 1.8
    raise ValueError(f"unknown temperature unit {unit!r}, expected one of {TEMPERATURE_UNITS}")


def celsius_to_unit(Temp_C, unit):
    if unit == '°C':
        return Temp_C
    if unit == '°F':
        return Temp_C * 1.8 + 32.0
    raise ValueError(f"unknown temperature unit {unit!r}, expected one of {TEMPERATURE_UNITS}")


def bar_to_psi(bar):
    return bar * PSI_PER_BAR
