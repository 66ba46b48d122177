"""Tests for value codes embedded in part numbers."""

import pytest

from mpn_mcp.similarity.values import (
    parse_capacitance_code,
    parse_resistance_code,
    parse_tolerance_code,
    parse_voltage_code,
)


class TestResistance:

    @pytest.mark.parametrize("code,ohms", [
        ("4R7", 4.7),
        ("R47", 0.47),
        ("10K0", 10000.0),
        ("10K", 10000.0),
        ("4M7", 4.7e6),
        ("1002", 10000.0),
        ("103", 10000.0),
        ("100", 10.0),
    ])
    def test_codes(self, code, ohms):
        assert parse_resistance_code(code) == pytest.approx(ohms)

    @pytest.mark.parametrize("code", [None, "", "R", "ABC", "1"])
    def test_invalid(self, code):
        assert parse_resistance_code(code) is None


class TestCapacitance:

    @pytest.mark.parametrize("code,farads", [
        ("104", 1e-7),
        ("105", 1e-6),
        ("220", 22e-12),
        ("229", 2.2e-12),
        ("4R7", 4.7e-12),
    ])
    def test_codes(self, code, farads):
        assert parse_capacitance_code(code) == pytest.approx(farads)

    @pytest.mark.parametrize("code", [None, "10", "1000", "AB1"])
    def test_invalid(self, code):
        assert parse_capacitance_code(code) is None


class TestVoltage:

    def test_v_as_decimal(self):
        assert parse_voltage_code("5V1") == pytest.approx(5.1)
        assert parse_voltage_code("12V") == pytest.approx(12.0)

    def test_plain(self):
        assert parse_voltage_code("3.3") == pytest.approx(3.3)

    def test_implied_decimal(self):
        assert parse_voltage_code("33", implied_decimal=True) == pytest.approx(3.3)
        assert parse_voltage_code("50", implied_decimal=True) == pytest.approx(5.0)
        assert parse_voltage_code("3.3", implied_decimal=True) is None

    def test_invalid(self):
        assert parse_voltage_code("") is None
        assert parse_voltage_code("ADJ") is None


class TestTolerance:

    def test_codes(self):
        assert parse_tolerance_code("F") == 1.0
        assert parse_tolerance_code("j") == 5.0
        assert parse_tolerance_code("Q") is None
        assert parse_tolerance_code(None) is None
