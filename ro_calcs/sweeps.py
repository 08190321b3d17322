import pandas as pd

from .conditions import OperatingConditions
from .pressure import predict_minimum_pressure

PRESSURE_COLUMN = 'Predicted Pressure (bar)'


def _check_field(field):
    if field not in OperatingConditions.field_names():
        raise ValueError(f"unknown operating condition {field!r}")


def sweep_field(base, field, values):
    """Predicted pressure while varying one field, others held at ``base``."""
    _check_field(field)
    pressures = [predict_minimum_pressure(base.replace(**{field: float(v)})) for v in values]
    return pd.DataFrame({
        field: [float(v) for v in values],
        PRESSURE_COLUMN: pressures,
    })


def sweep_grid(base, x_field, x_values, y_field, y_values):
    """Long-form table over two fields, ready for a pivot/heatmap."""
    _check_field(x_field)
    _check_field(y_field)
    if x_field == y_field:
        raise ValueError("sweep fields must differ")

    data = []
    for x in x_values:
        for y in y_values:
            conditions = base.replace(**{x_field: float(x), y_field: float(y)})
            data.append({
                x_field: float(x),
                y_field: float(y),
                PRESSURE_COLUMN: predict_minimum_pressure(conditions),
            })
    return pd.DataFrame(data)
