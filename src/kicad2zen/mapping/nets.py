"""Net name -> electrical role inference."""

from __future__ import annotations

import re
from enum import Enum

from ..constants import UNCONNECTED_NET_PREFIX


class NetRole(Enum):
    POWER = "power"
    GROUND = "ground"
    DIFF_P = "diffp"
    DIFF_N = "diffn"
    SIGNAL = "signal"


_GROUND_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^GND", re.IGNORECASE),  # GND, GND1, GND_ANALOG
    re.compile(r"^V(SS|EE)", re.IGNORECASE),  # VSS, VEE
    re.compile(r"^DGND", re.IGNORECASE),
    re.compile(r"^AGND", re.IGNORECASE),
    re.compile(r"^PGND", re.IGNORECASE),
    re.compile(r"^SGND", re.IGNORECASE),
    re.compile(r"_GND$", re.IGNORECASE),  # SENSOR_GND
    re.compile(r"^0V$", re.IGNORECASE),
]

_POWER_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^V(CC|DD|BAT|IN|OUT|BUS)", re.IGNORECASE),
    re.compile(r"^\+\d+V", re.IGNORECASE),  # +3V3, +5V, +12V
    re.compile(r"^\d+V\d*", re.IGNORECASE),  # 3V3, 5V, 12V
    re.compile(r"^PWR", re.IGNORECASE),
    re.compile(r"_PWR$", re.IGNORECASE),  # SENSOR_PWR
    re.compile(r"^VREF", re.IGNORECASE),
    re.compile(r"^AVDD", re.IGNORECASE),
    re.compile(r"^DVDD", re.IGNORECASE),
]

_DIFF_P_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"[_\-]P$", re.IGNORECASE),  # USB_D_P, ETH_TX_P
    re.compile(r"\+$"),  # USB_D+
    re.compile(r"_DP$", re.IGNORECASE),  # USB_DP
    re.compile(r"_POS$", re.IGNORECASE),  # CLK_POS
]

_DIFF_N_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"[_\-]N$", re.IGNORECASE),
    re.compile(r"-$"),  # USB_D-
    re.compile(r"_DN$", re.IGNORECASE),
    re.compile(r"_NEG$", re.IGNORECASE),
]

# Checked in order, first matching rule set wins. Ground comes before power:
# VSS/VEE share the "V..." shape of the VCC/VDD power rules.
NET_RULES: tuple[tuple[NetRole, list[re.Pattern[str]]], ...] = (
    (NetRole.GROUND, _GROUND_PATTERNS),
    (NetRole.POWER, _POWER_PATTERNS),
    (NetRole.DIFF_P, _DIFF_P_PATTERNS),
    (NetRole.DIFF_N, _DIFF_N_PATTERNS),
)

_CONSTRUCTORS: dict[NetRole, str] = {
    NetRole.POWER: "Power",
    NetRole.GROUND: "Ground",
}


def is_connected_net(name: str) -> bool:
    """False for the empty net and KiCad's auto-named ``unconnected-...`` nets."""
    return bool(name) and not name.startswith(UNCONNECTED_NET_PREFIX)


def classify_net(name: str) -> NetRole:
    """Infer the role of a KiCad net from its name.

    Examples:
        "VCC" -> POWER, "+3V3" -> POWER, "GND" -> GROUND, "VSS" -> GROUND,
        "USB_D_P" -> DIFF_P, "USB_DN" -> DIFF_N, "SPI_CLK" -> SIGNAL
    """
    if not is_connected_net(name):
        return NetRole.SIGNAL

    for role, patterns in NET_RULES:
        if any(pattern.search(name) for pattern in patterns):
            return role

    return NetRole.SIGNAL


def net_constructor(role: NetRole) -> str:
    """Zener constructor used to declare a net of the given role."""
    return _CONSTRUCTORS.get(role, "Net")
