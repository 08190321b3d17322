import logging
import os
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parent / 'data' / 'sample_data.csv'

SAMPLE_COLUMNS = [
    'timestamp',
    'salinity_mol_L',
    'temperature_C',
    'pH',
    'turbidity_NTU',
    'pump_pressure_bar',
    'permeate_flow_Lh',
    'permeate_conductivity_uScm',
    'membrane_area_m2',
    'fouling_factor',
]

# column -> (table header, decimals)
DISPLAY_COLUMNS = {
    'timestamp':         ('Timestamp', None),
    'salinity_mol_L':    ('Salinity (mol/L)', 3),
    'temperature_C':     ('Temp (°C)', 1),
    'pH':                ('pH', 2),
    'turbidity_NTU':     ('Turbidity', 1),
    'pump_pressure_bar': ('Pressure (bar)', 1),
    'permeate_flow_Lh':  ('Flow (L/h)', 0),
    'fouling_factor':    ('Fouling', 2),
}


def sample_data_path():
    """CSV location, overridable with the RO_SAMPLE_DATA environment variable."""
    return Path(os.environ.get('RO_SAMPLE_DATA', DEFAULT_PATH))


def load_sample_data(path=None, rows=10):
    """Read historical plant readings for display.

    Raises FileNotFoundError when the file is missing and ValueError when
    expected columns are absent.
    """
    path = Path(path) if path is not None else sample_data_path()
    df = pd.read_csv(path)

    missing = [col for col in SAMPLE_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    logger.info("Loaded %d sample rows from %s", len(df), path)
    return df[SAMPLE_COLUMNS].head(rows).reset_index(drop=True)


def format_for_display(df):
    """Select and label the columns shown in the dataset table."""
    table = pd.DataFrame()
    for col, (header, decimals) in DISPLAY_COLUMNS.items():
        if decimals is None:
            table[header] = df[col].astype(str)
        else:
            table[header] = df[col].map(lambda v, d=decimals: f"{v:.{d}f}")
    return table
