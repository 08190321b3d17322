"""
Unit tests for ro_calcs/inputs.py.
"""

import logging
import math

import pytest

from ro_calcs.conditions import OperatingConditions
from ro_calcs.constants import DEFAULTS
from ro_calcs.inputs import parse_conditions, parse_or_default, unit_defaults
from ro_calcs.pressure import predict_minimum_pressure


class TestParseOrDefault:

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("0.68", 0.68),
        ("  22 ", 22.0),
        ("-3.5", -3.5),
        ("+.5", 0.5),
        ("5.", 5.0),
        ("1e2", 100.0),
        ("12abc", 12.0),
        ("7.7 pH", 7.7),
        ("1e", 1.0),
        ("2.5e-1x", 0.25),
        (7, 7.0),
        (7.7, 7.7),
    ])
    def test_reads_leading_number(self, text, expected):
        assert parse_or_default(text, 99.0) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text,sign", [("Infinity", 1), ("-Infinity", -1), ("Infinityx", 1)])
    def test_infinity_literal(self, text, sign):
        value = parse_or_default(text, 99.0)
        assert math.isinf(value)
        assert math.copysign(1, value) == sign

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "   ", "abc", "x12", ".", "-", "e5", None, "nan", "inf"])
    def test_falls_back_to_default(self, text):
        assert parse_or_default(text, 5.2) == 5.2


class TestParseConditions:

    @pytest.mark.unit
    def test_all_fields_parsed(self):
        raw = {
            'salinity': "0.5", 'temperature': "30", 'pH': "7.0",
            'turbidity': "1.0", 'membrane_area': "120", 'fouling_factor': "0.3",
        }
        conditions = parse_conditions(raw)
        assert conditions == OperatingConditions(
            salinity=0.5, temperature=30.0, pH=7.0, turbidity=1.0,
            membrane_area=120.0, fouling_factor=0.3,
        )

    @pytest.mark.unit
    def test_empty_mapping_gives_defaults(self):
        assert parse_conditions({}) == OperatingConditions.defaults()

    @pytest.mark.unit
    def test_bad_fields_use_their_own_default(self, caplog):
        raw = {'salinity': "salty", 'temperature': "18", 'membrane_area': ""}
        with caplog.at_level(logging.DEBUG, logger="ro_calcs.inputs"):
            conditions = parse_conditions(raw)

        assert conditions.salinity == DEFAULTS['salinity']
        assert conditions.temperature == 18.0
        assert conditions.membrane_area == DEFAULTS['membrane_area']
        assert "salinity" in caplog.text
        assert "membrane_area" in caplog.text

    @pytest.mark.unit
    def test_zero_area_is_kept(self):
        # parsing is not validation, the predictor rejects it later
        assert parse_conditions({'membrane_area': "0"}).membrane_area == 0.0


class TestInputUnits:

    @pytest.mark.unit
    def test_defaults_in_base_units(self):
        assert unit_defaults() == DEFAULTS

    @pytest.mark.unit
    def test_defaults_in_fahrenheit_and_mg_L(self):
        defaults = unit_defaults('°F', 'mg/L')
        assert defaults['temperature'] == pytest.approx(71.6)
        assert defaults['salinity'] == pytest.approx(39739.2)
        assert defaults['pH'] == DEFAULTS['pH']

    @pytest.mark.unit
    @pytest.mark.parametrize("temp_unit", ['°C', '°F'])
    @pytest.mark.parametrize("sal_unit", ['mol/L', 'mg/L', 'ppt'])
    def test_untouched_default_text_keeps_reference(self, temp_unit, sal_unit):
        # the form shows the defaults formatted in the selected units
        raw = {name: f"{value:g}" for name, value in unit_defaults(temp_unit, sal_unit).items()}
        conditions = parse_conditions(raw, temp_unit, sal_unit)

        assert conditions.temperature == pytest.approx(22.0)
        assert conditions.salinity == pytest.approx(0.68)
        assert predict_minimum_pressure(conditions) == pytest.approx(69.86, abs=0.01)

    @pytest.mark.unit
    def test_typed_values_are_converted(self):
        conditions = parse_conditions({'temperature': "50", 'salinity': "35"}, '°F', 'ppt')
        assert conditions.temperature == pytest.approx(10.0)
        assert conditions.salinity == pytest.approx(35 / 58.44)

    @pytest.mark.unit
    def test_fallback_is_not_converted(self):
        conditions = parse_conditions({'temperature': "warm", 'salinity': ""}, '°F', 'mg/L')
        assert conditions.temperature == DEFAULTS['temperature']
        assert conditions.salinity == DEFAULTS['salinity']
