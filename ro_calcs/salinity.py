from .constants import NACL_MOLAR_MASS

SALINITY_UNITS = ('mol/L', 'mg/L', 'ppt')


# Salinity conversion (mol/L, mg/L or ppt → mol/L NaCl)
def salinity_to_mol_L(value, unit):
    """Convert a salinity reading to NaCl molarity."""
    if unit == 'mol/L':
        return value
    if unit == 'mg/L':
        return (value / 1000.0) / NACL_MOLAR_MASS
    if unit == 'ppt':
        # 1 ppt ≈ 1 g/L
        return value / NACL_MOLAR_MASS
    raise ValueError(f"unknown salinity unit {unit!r}, expected one of {SALINITY_UNITS}")


def mol_L_to_mg_L(salinity_mol_L):
    return salinity_mol_L * NACL_MOLAR_MASS * 1000.0


def mol_L_to_unit(salinity_mol_L, unit):
    """Express NaCl molarity in the given salinity unit."""
    if unit == 'mol/L':
        return salinity_mol_L
    if unit == 'mg/L':
        return mol_L_to_mg_L(salinity_mol_L)
    if unit == 'ppt':
        return salinity_mol_L * NACL_MOLAR_MASS
    raise ValueError(f"unknown salinity unit {unit!r}, expected one of {SALINITY_UNITS}")
