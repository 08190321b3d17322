import logging
import re

from .conditions import OperatingConditions
from .constants import DEFAULTS
from .salinity import salinity_to_mol_L, mol_L_to_unit
from .units import temperature_to_celsius, celsius_to_unit

logger = logging.getLogger(__name__)

# Leading decimal literal, read the way a browser's parseFloat reads it
_NUMBER_PREFIX = re.compile(r'\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))')


def parse_or_default(text, default):
    """Parse the leading number of user text, falling back to ``default``.

    Trailing junk is ignored ("12abc" -> 12.0). Text with no leading
    number, such as "", "abc" or "nan", gives the default.
    """
    if text is None:
        return default
    match = _NUMBER_PREFIX.match(str(text))
    if match is None:
        return default
    return float(match.group(1))


def unit_defaults(temp_unit='°C', sal_unit='mol/L'):
    """Documented defaults expressed in the selected input units."""
    defaults = dict(DEFAULTS)
    defaults['temperature'] = celsius_to_unit(DEFAULTS['temperature'], temp_unit)
    defaults['salinity'] = mol_L_to_unit(DEFAULTS['salinity'], sal_unit)
    return defaults


def parse_conditions(raw, temp_unit='°C', sal_unit='mol/L'):
    """Build OperatingConditions from a mapping of field name -> raw text.

    Typed temperature and salinity are converted from the selected units.
    Missing or unparseable fields take their documented default, which is
    already in °C and mol/L.
    """
    values = {}
    fallbacks = []
    for name, default in DEFAULTS.items():
        value = parse_or_default(raw.get(name), None)
        if value is None:
            fallbacks.append(name)
            values[name] = default
        elif name == 'temperature':
            values[name] = temperature_to_celsius(value, temp_unit)
        elif name == 'salinity':
            values[name] = salinity_to_mol_L(value, sal_unit)
        else:
            values[name] = value

    if fallbacks:
        logger.debug("Using defaults for %s", ", ".join(fallbacks))
    return OperatingConditions(**values)
