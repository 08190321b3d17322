import logging

import numpy as np
import pandas as pd
import plotly.express as px
import streamlit as st

from ro_calcs.constants import INPUT_FIELDS, HISTORICAL_PRESSURE_BAND
from ro_calcs.inputs import parse_conditions, unit_defaults
from ro_calcs.logging_config import configure_logging
from ro_calcs.pressure import pressure_breakdown, MembraneAreaError
from ro_calcs.salinity import SALINITY_UNITS
from ro_calcs.sample_data import load_sample_data, format_for_display
from ro_calcs.sweeps import sweep_field, sweep_grid, PRESSURE_COLUMN
from ro_calcs.units import bar_to_psi, TEMPERATURE_UNITS
from ro_calcs.water_properties import relative_viscosity

configure_logging()
logger = logging.getLogger("ro_calcs.app")


def text_field(name, default, unit):
    field = INPUT_FIELDS[name]
    suffix = f" ({unit})" if unit else ""
    return st.text_input(
        f"{field['label']}{suffix}",
        value=f"{default:g}",
        help=f"Recommended range {field['min']:g} to {field['max']:g} {field['unit']}",
    )


# ------------------------------------ Streamlit Application ------------------------------------
st.set_page_config('RO Minimum Pressure Calculator', page_icon="💧", layout='wide')
st.title("RO Minimum Pressure Calculator")
st.caption("Physics-informed feed pressure estimate for reverse-osmosis desalination")

with st.expander("How the model works"):
    st.markdown(
        "- Osmotic pressure from the Van 't Hoff equation (NaCl, i = 2)\n"
        "- 60 % operating margin and a linear viscosity correction around 25 °C\n"
        "- Additive penalties for turbidity, pH away from 7.75 and fouling\n"
        "- Inverse square-root scaling with membrane area"
    )

tab_data, tab_predict = st.tabs(["Sample Dataset", "Pressure Predictor"])

# ----- Sample Dataset --------
with tab_data:
    st.subheader("Operational Data Sample")
    try:
        df_sample = load_sample_data()
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        logger.exception("Failed to load sample data")
        st.error(f"Failed to load sample data: {exc}")
    else:
        st.dataframe(format_for_display(df_sample), hide_index=True)

# ----- Pressure Predictor --------
with tab_predict:
    st.subheader("Minimum Pressure Predictor")
    col1, col2 = st.columns(2)

    # unit of measure
    with col2:
        temp_unit = st.selectbox("Temperature unit", list(TEMPERATURE_UNITS), index=0)
        sal_unit = st.selectbox("Salinity unit", list(SALINITY_UNITS), index=0)
        st.info("Unparseable entries fall back to the default value")

    # value
    units = {name: field['unit'] for name, field in INPUT_FIELDS.items()}
    units.update(temperature=temp_unit, salinity=sal_unit)
    defaults = unit_defaults(temp_unit, sal_unit)
    with col1:
        raw = {name: text_field(name, defaults[name], units[name]) for name in INPUT_FIELDS}

    conditions = parse_conditions(raw, temp_unit, sal_unit)

    if st.button("Calculate Minimum Pressure"):
        try:
            breakdown = pressure_breakdown(conditions)
        except MembraneAreaError as exc:
            st.error(str(exc))
            st.stop()

        predicted = breakdown.predicted
        logger.info("Predicted %.2f bar for %s", predicted, conditions)

        st.markdown(" # Result 💡")
        res1, res2 = st.columns(2)

        with res1:
            st.metric("Calculated Minimum Pressure (bar)", f"{predicted:.2f}")
            st.metric("Equivalent (psi)", f"{bar_to_psi(predicted):.1f}")
            low, high = HISTORICAL_PRESSURE_BAND
            if not low <= predicted <= high:
                st.warning(f"Outside the historical {low:g}-{high:g} bar operating band")

            st.markdown("**Input Parameters**")
            st.text(
                f"Salinity: {conditions.salinity:.3f} mol/L\n"
                f"Temperature: {conditions.temperature:.1f} °C\n"
                f"Fouling Factor: {conditions.fouling_factor:.2f}\n"
                f"Turbidity: {conditions.turbidity:.1f} NTU"
            )

        with res2:
            df_steps = pd.DataFrame({
                "Step": [
                    "Osmotic pressure (bar)",
                    "With operating margin (bar)",
                    "Viscosity adjustment (-)",
                    "After temperature (bar)",
                    "Turbidity penalty (bar)",
                    "pH penalty (bar)",
                    "Area scale (-)",
                    "Fouling penalty (bar)",
                ],
                "Value": [
                    breakdown.osmotic,
                    breakdown.operational,
                    breakdown.viscosity_adjustment,
                    breakdown.after_temperature,
                    breakdown.turbidity_penalty,
                    breakdown.ph_penalty,
                    breakdown.area_scale,
                    breakdown.fouling_penalty,
                ],
            })
            st.dataframe(df_steps, hide_index=True)
            mu_ratio = relative_viscosity(conditions.temperature)
            if mu_ratio is None:
                st.caption("Reference water viscosity unavailable at this temperature")
            else:
                st.caption(f"Reference water viscosity ratio μ(T)/μ(25 °C): {mu_ratio:.3f}")

        # Graphs
        st.markdown("# Graphs 📊")

        # ------- Pressure vs Temperature -------
        temps = np.linspace(INPUT_FIELDS['temperature']['min'], INPUT_FIELDS['temperature']['max'], 20)
        df_T = sweep_field(conditions, 'temperature', temps)
        fig_T = px.line(df_T, x='temperature', y=PRESSURE_COLUMN,
                        labels={'temperature': "Temperature (°C)"},
                        title=f"Pressure vs Temperature @ {conditions.salinity:.3f} mol/L 🌡️",
                        markers=True)
        fig_T.update_traces(line_color='orange')
        st.plotly_chart(fig_T)

        # ------- Pressure vs Membrane Area -------
        areas = np.linspace(INPUT_FIELDS['membrane_area']['min'], INPUT_FIELDS['membrane_area']['max'], 20)
        df_A = sweep_field(conditions, 'membrane_area', areas)
        fig_A = px.line(df_A, x='membrane_area', y=PRESSURE_COLUMN,
                        labels={'membrane_area': "Membrane Area (m²)"},
                        title=f"Pressure vs Membrane Area @ {conditions.temperature:.1f} °C 🧱",
                        markers=True)
        fig_A.update_traces(line_color='lightgreen')
        st.plotly_chart(fig_A)

        # ------- Salinity x Temperature Heat Map -------
        salinities = np.linspace(INPUT_FIELDS['salinity']['min'], INPUT_FIELDS['salinity']['max'], 20)
        df_grid = sweep_grid(conditions, 'temperature', temps, 'salinity', salinities)
        pivot = df_grid.pivot(index='salinity', columns='temperature', values=PRESSURE_COLUMN)

        fig_combo = px.imshow(pivot, aspect='auto', origin='lower',
                              labels={
                                  "x": "Temperature (°C)",
                                  "y": "Salinity (mol/L)",
                                  "color": "Pressure (bar)",
                              },
                              title=f"Pressure Heatmap @ {conditions.membrane_area:g} m², fouling {conditions.fouling_factor:.2f} 🔥",
                              color_continuous_scale='Blues')
        st.plotly_chart(fig_combo)
