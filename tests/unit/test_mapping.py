"""Tests for the mapping tables: symbols, nets, values, footprints."""

from __future__ import annotations

import pytest

from kicad2zen.mapping import (
    SYMBOL_TABLE,
    ComponentKind,
    FootprintKind,
    NetRole,
    classify_net,
    extract_package,
    infer_footprint_kind,
    infer_kind_from_footprint,
    infer_kind_from_reference,
    is_connected_net,
    is_smd_footprint,
    looks_like_part_number,
    map_symbol,
    net_constructor,
    normalize_value,
    pin_map_for,
    template_for,
    value_kind_for,
)
from kicad2zen.mapping.symbols import PatternKind, prefix


class TestSymbolMapping:
    def test_resistor(self) -> None:
        template = map_symbol("Device:R")
        assert template is not None
        assert template.module_name == "Resistor"
        assert template.module_path == "@stdlib/generics/Resistor.zen"
        assert dict(template.pin_map) == {"1": "P1", "2": "P2"}
        assert template.flags == ()

    def test_polarized_capacitor_flag(self) -> None:
        template = map_symbol("Device:C_Polarized")
        assert template is not None
        assert template.module_name == "Capacitor"
        assert dict(template.flags) == {"polarized": "true"}

    def test_led_pins(self) -> None:
        assert pin_map_for("Device:LED") == {"1": "K", "2": "A"}

    def test_zener_flag(self) -> None:
        template = map_symbol("Device:D_Zener")
        assert template is not None
        assert dict(template.flags) == {"diode_type": '"zener"'}

    @pytest.mark.parametrize(
        ("lib_id", "module", "flags"),
        [
            ("Device:Q_NPN_BCE", "Bjt", {"polarity": '"NPN"'}),
            ("Device:Q_PNP_EBC", "Bjt", {"polarity": '"PNP"'}),
            ("Device:Q_NMOS_GDS", "Mosfet", {"channel": '"N"'}),
            ("Device:Q_PMOS_GSD", "Mosfet", {"channel": '"P"'}),
            ("Device:Thermistor_NTC", "Thermistor", {}),
            ("Connector:TestPoint_Probe", "TestPoint", {}),
        ],
    )
    def test_prefix_matches(self, lib_id: str, module: str, flags: dict[str, str]) -> None:
        template = map_symbol(lib_id)
        assert template is not None
        assert template.module_name == module
        assert dict(template.flags) == flags

    def test_exact_does_not_match_longer_id(self) -> None:
        # "Device:R_Pack04" is not a plain resistor
        assert map_symbol("Device:R_Pack04") is None

    def test_crystal_gnd24_pins(self) -> None:
        assert pin_map_for("Device:Crystal_GND24") == {"1": "P1", "3": "P2", "2": "GND", "4": "GND"}

    def test_unmapped(self) -> None:
        assert map_symbol("MCU_Microchip:ATmega328P") is None
        assert pin_map_for("MCU_Microchip:ATmega328P") == {}

    def test_pin_name_falls_back_to_pad_number(self) -> None:
        template = map_symbol("Device:R")
        assert template is not None
        assert template.pin_name("3") == "3"

    def test_first_match_wins(self) -> None:
        # Every lib_id resolves to the template of its earliest matching entry
        for index, (pattern, template) in enumerate(SYMBOL_TABLE):
            earlier = [t for p, t in SYMBOL_TABLE[:index] if p.matches(pattern.text)]
            expected = earlier[0] if earlier else template
            assert map_symbol(pattern.text) is expected

    def test_prefix_pattern(self) -> None:
        pattern = prefix("Device:Q_NPN")
        assert pattern.kind is PatternKind.PREFIX
        assert pattern.matches("Device:Q_NPN_BCE")
        assert not pattern.matches("Device:Q_PNP_BCE")


class TestNetClassification:
    @pytest.mark.parametrize(
        ("name", "role"),
        [
            ("GND", NetRole.GROUND),
            ("GND1", NetRole.GROUND),
            ("gnd", NetRole.GROUND),
            ("VSS", NetRole.GROUND),
            ("VEE", NetRole.GROUND),
            ("AGND", NetRole.GROUND),
            ("PGND", NetRole.GROUND),
            ("SENSOR_GND", NetRole.GROUND),
            ("VCC", NetRole.POWER),
            ("VDD_3V3", NetRole.POWER),
            ("+3V3", NetRole.POWER),
            ("+5V", NetRole.POWER),
            ("3V3", NetRole.POWER),
            ("VBUS", NetRole.POWER),
            ("SENSOR_PWR", NetRole.POWER),
            ("USB_D_P", NetRole.DIFF_P),
            ("USB_D+", NetRole.DIFF_P),
            ("USB_DP", NetRole.DIFF_P),
            ("CLK_POS", NetRole.DIFF_P),
            ("USB_D_N", NetRole.DIFF_N),
            ("USB_D-", NetRole.DIFF_N),
            ("USB_DN", NetRole.DIFF_N),
            ("CLK_NEG", NetRole.DIFF_N),
            ("SPI_CLK", NetRole.SIGNAL),
            ("Net-(R1-Pad1)", NetRole.SIGNAL),
        ],
    )
    def test_classify(self, name: str, role: NetRole) -> None:
        assert classify_net(name) is role

    def test_ground_before_power(self) -> None:
        # VSS has the "V..." shape of the power rules
        assert classify_net("VSS") is NetRole.GROUND
        assert classify_net("VSSA") is NetRole.GROUND

    def test_empty_and_unconnected_are_signal(self) -> None:
        assert classify_net("") is NetRole.SIGNAL
        assert classify_net("unconnected-(U1-GND-Pad3)") is NetRole.SIGNAL

    def test_is_connected(self) -> None:
        assert is_connected_net("GND")
        assert not is_connected_net("")
        assert not is_connected_net("unconnected-(R1-Pad1)")

    def test_constructors(self) -> None:
        assert net_constructor(NetRole.POWER) == "Power"
        assert net_constructor(NetRole.GROUND) == "Ground"
        assert net_constructor(NetRole.DIFF_P) == "Net"
        assert net_constructor(NetRole.SIGNAL) == "Net"


class TestValueNormalization:
    @pytest.mark.parametrize(
        ("value", "kind", "expected"),
        [
            ("10k", ComponentKind.RESISTOR, "10kohm"),
            ("4k7", ComponentKind.RESISTOR, "4.7kohm"),
            ("1M", ComponentKind.RESISTOR, "1Mohm"),
            ("2M2", ComponentKind.RESISTOR, "2.2Mohm"),
            ("100", ComponentKind.RESISTOR, "100ohm"),
            ("10kOhm", ComponentKind.RESISTOR, "10kohm"),
            ("4.7 kohm", ComponentKind.RESISTOR, "4.7kohm"),
            ("100n", ComponentKind.CAPACITOR, "100nF"),
            ("10u", ComponentKind.CAPACITOR, "10uF"),
            ("1p", ComponentKind.CAPACITOR, "1pF"),
            ("4.7uF", ComponentKind.CAPACITOR, "4.7uF"),
            ("100nF 50V", ComponentKind.CAPACITOR, "100nF"),
            ("10u", ComponentKind.INDUCTOR, "10uH"),
            ("100n", ComponentKind.INDUCTOR, "100nH"),
            ("10uH 1A", ComponentKind.INDUCTOR, "10uH"),
        ],
    )
    def test_normalize(self, value: str, kind: ComponentKind, expected: str) -> None:
        assert normalize_value(value, kind) == expected

    def test_part_number_passthrough(self) -> None:
        assert normalize_value("ERJ-2RKF1003X", ComponentKind.RESISTOR) == "ERJ-2RKF1003X"

    def test_other_passthrough(self) -> None:
        assert normalize_value("RED", ComponentKind.OTHER) == "RED"

    def test_unrecognized_passthrough(self) -> None:
        assert normalize_value("DNP", ComponentKind.RESISTOR) == "DNP"

    @pytest.mark.parametrize(
        "value",
        ["10k", "4k7", "100", "1M", "100n", "4.7uF", "10u", "ERJ-2RKF1003X", "DNP", " 10k "],
    )
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_idempotent(self, value: str, kind: ComponentKind) -> None:
        once = normalize_value(value, kind)
        assert normalize_value(once, kind) == once

    def test_part_number_heuristic(self) -> None:
        assert looks_like_part_number("ERJ-2RKF1003X")
        assert looks_like_part_number("GRM155R71C104KA88D")
        assert not looks_like_part_number("10k")
        assert not looks_like_part_number("100nF")
        assert not looks_like_part_number("4-7")

    @pytest.mark.parametrize(
        ("lib_id", "kind"),
        [
            ("Device:R", ComponentKind.RESISTOR),
            ("Device:R_Small", ComponentKind.RESISTOR),
            ("Device:C", ComponentKind.CAPACITOR),
            ("Device:C_Polarized", ComponentKind.CAPACITOR),
            ("Device:L", ComponentKind.INDUCTOR),
            ("Device:LED", ComponentKind.OTHER),
            ("Device:D", ComponentKind.OTHER),
        ],
    )
    def test_kind_from_lib_id(self, lib_id: str, kind: ComponentKind) -> None:
        assert ComponentKind.from_lib_id(lib_id) is kind


class TestPackageExtraction:
    @pytest.mark.parametrize(
        ("footprint", "package"),
        [
            ("Resistor_SMD:R_0402_1005Metric", "0402"),
            ("Capacitor_SMD:C_0603_1608Metric", "0603"),
            ("Inductor_SMD:L_1206_3216Metric", "1206"),
            ("LED_SMD:LED_0805_2012Metric", "0805"),
            ("Crystal:Crystal_SMD_3215-2Pin_3.2x1.5mm", "3215"),
            ("Diode_SMD:D_SOD-123", "SOD-123"),
            ("Package_TO_SOT_SMD:SOT-23", "SOT-23"),
            ("Package_DFN_QFN:QFN-16_3x3mm", "QFN-16"),
            ("Package_SO:SOIC-8_3.9x4.9mm_P1.27mm", "SOIC-8"),
            ("Package_SO:TSSOP-16_4.4x5mm_P0.65mm", "TSSOP-16"),
            ("R_0402_1005Metric", "0402"),
        ],
    )
    def test_known_packages(self, footprint: str, package: str) -> None:
        assert extract_package(footprint) == package

    def test_unknown_package(self) -> None:
        assert extract_package("Custom:MyFootprint") is None
        assert extract_package("") is None

    def test_is_smd_footprint(self) -> None:
        assert is_smd_footprint("Resistor_SMD:R_0402_1005Metric")
        assert is_smd_footprint("R_0402_1005Metric")
        assert not is_smd_footprint("Resistor_THT:R_Axial_DIN0207")


class TestFootprintKind:
    @pytest.mark.parametrize(
        ("footprint", "kind"),
        [
            ("Resistor_SMD:R_0402_1005Metric", FootprintKind.RESISTOR),
            ("Capacitor_SMD:C_0805_2012Metric", FootprintKind.CAPACITOR),
            ("Inductor_SMD:L_0603_1608Metric", FootprintKind.INDUCTOR),
            ("LED_SMD:LED_0805_2012Metric", FootprintKind.LED),
            ("Diode_SMD:D_SOD-123", FootprintKind.DIODE),
            ("Crystal:Crystal_SMD_3215-2Pin_3.2x1.5mm", FootprintKind.CRYSTAL),
            ("Connector_PinHeader_2.54mm:PinHeader_1x04_P2.54mm_Vertical", FootprintKind.UNKNOWN),
            ("Connector_USB:USB_C_Receptacle_conn", FootprintKind.CONNECTOR),
            ("Custom:MyFootprint", FootprintKind.UNKNOWN),
        ],
    )
    def test_from_footprint(self, footprint: str, kind: FootprintKind) -> None:
        assert infer_kind_from_footprint(footprint) is kind

    @pytest.mark.parametrize(
        ("reference", "kind"),
        [
            ("R12", FootprintKind.RESISTOR),
            ("C3", FootprintKind.CAPACITOR),
            ("L1", FootprintKind.INDUCTOR),
            ("D4", FootprintKind.DIODE),
            ("Q2", FootprintKind.TRANSISTOR),
            ("Y1", FootprintKind.CRYSTAL),
            ("X1", FootprintKind.CRYSTAL),
            ("J1", FootprintKind.CONNECTOR),
            ("P2", FootprintKind.CONNECTOR),
            ("U1", FootprintKind.UNKNOWN),
            ("", FootprintKind.UNKNOWN),
        ],
    )
    def test_from_reference(self, reference: str, kind: FootprintKind) -> None:
        assert infer_kind_from_reference(reference) is kind

    def test_footprint_wins_over_reference(self) -> None:
        assert infer_footprint_kind("LED_SMD:LED_0603_1608Metric", "D1") is FootprintKind.LED

    def test_reference_used_when_footprint_unknown(self) -> None:
        assert infer_footprint_kind("Custom:Blob", "R5") is FootprintKind.RESISTOR

    def test_templates(self) -> None:
        led = template_for(FootprintKind.LED)
        assert led is not None
        assert dict(led.flags) == {"color": '"red"'}
        assert dict(led.pin_map) == {"1": "K", "2": "A"}
        assert template_for(FootprintKind.CONNECTOR) is None
        assert template_for(FootprintKind.TRANSISTOR) is None

    def test_value_kinds(self) -> None:
        assert value_kind_for(FootprintKind.RESISTOR) is ComponentKind.RESISTOR
        assert value_kind_for(FootprintKind.LED) is ComponentKind.OTHER
