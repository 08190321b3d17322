R_BAR = 0.083145  # gas constant, L·bar/(K·mol)
KELVIN_OFFSET = 273.15
VANT_HOFF_FACTOR = 2  # NaCl dissociates into two ions
NACL_MOLAR_MASS = 58.44  # g/mol

# Pressure model coefficients
OPERATIONAL_MARGIN = 1.6  # 60 % over pure osmotic pressure
VISCOSITY_COEFF = 0.004  # per °C away from the reference
REFERENCE_TEMP_C = 25.0
FOULING_COEFF = 32.0  # bar at fouling factor 1.0
TURBIDITY_COEFF = 2.5  # bar/NTU
PH_COEFF = 6.0  # bar per pH unit
OPTIMAL_PH = 7.75
AREA_SCALE_COEFF = 7.0

# Former clamp on the prediction, now only used to flag unusual results
HISTORICAL_PRESSURE_BAND = (35.0, 70.0)

# Predictor inputs: label, unit, recommended range, step and default
INPUT_FIELDS = {
    'salinity':       {'label': 'Feedwater Salinity', 'unit': 'mol/L', 'min': 0.0,  'max': 2.0,   'step': 0.01, 'default': 0.68},
    'temperature':    {'label': 'Temperature',        'unit': '°C',    'min': 5.0,  'max': 50.0,  'step': 0.1,  'default': 22.0},
    'pH':             {'label': 'pH Level',           'unit': '',      'min': 5.0,  'max': 10.0,  'step': 0.1,  'default': 7.7},
    'turbidity':      {'label': 'Turbidity',          'unit': 'NTU',   'min': 0.0,  'max': 20.0,  'step': 0.1,  'default': 5.2},
    'membrane_area':  {'label': 'Membrane Area',      'unit': 'm²',    'min': 10.0, 'max': 500.0, 'step': 1.0,  'default': 50.0},
    'fouling_factor': {'label': 'Fouling Factor',     'unit': '0-1',   'min': 0.0,  'max': 1.0,   'step': 0.01, 'default': 0.1},
}

DEFAULTS = {name: field['default'] for name, field in INPUT_FIELDS.items()}
