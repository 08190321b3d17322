import dataclasses
from dataclasses import dataclass, fields

from .constants import DEFAULTS


@dataclass(frozen=True)
class OperatingConditions:
    """Snapshot of feedwater and membrane conditions.

    Values are taken as given. The recommended ranges in
    ``constants.INPUT_FIELDS`` are not enforced here.
    """
    salinity: float  # mol/L
    temperature: float  # °C
    pH: float
    turbidity: float  # NTU
    membrane_area: float  # m², must be > 0
    fouling_factor: float  # 0-1

    @classmethod
    def defaults(cls):
        return cls(**DEFAULTS)

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in fields(cls))

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)
