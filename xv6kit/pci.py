"""PCI configuration-space addressing and device enumeration."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable

PCI_CMD_BUS_MASTER = 1 << 2
PCI_CMD_INTR_DISABLE = 1 << 10

_U32 = 0xFFFFFFFF
_ENABLE = 0x80000000

ReadConfig = Callable[[int, int, int, int], int]


def config_address(bus: int, device: int, function: int, reg: int) -> int:
    """Return the value written to the configuration address port."""
    return (
        ((bus & 0xFF) << 16)
        | ((device & 0x1F) << 11)
        | ((function & 0x7) << 8)
        | (reg & 0xFC)
        | _ENABLE
    )


@dataclass(frozen=True)
class PciDevice:
    """Identity and base addresses of one PCI function."""

    bus: int
    device: int
    function: int
    device_id: int
    vendor_id: int
    base_class: int
    sub_class: int
    interface: int
    revision_id: int
    bar0: int
    bar1: int

    @classmethod
    def probe(cls, read_config: ReadConfig, bus: int, device: int, function: int) -> PciDevice:
        """Read a function's configuration registers.

        ``read_config(bus, device, function, reg)`` returns a 32-bit register.
        """
        ident = read_config(bus, device, function, 0x00) & _U32
        klass = read_config(bus, device, function, 0x08) & _U32
        bar0 = read_config(bus, device, function, 0x10) & _U32
        bar1 = read_config(bus, device, function, 0x14) & _U32
        return cls(
            bus=bus & 0xFF,
            device=device & 0x1F,
            function=function & 0x7,
            device_id=ident >> 16,
            vendor_id=ident & 0xFFFF,
            base_class=klass >> 24,
            sub_class=(klass >> 16) & 0xFF,
            interface=(klass >> 8) & 0xFF,
            revision_id=klass & 0xFF,
            bar0=bar0,
            bar1=bar1,
        )


def scan(read_config: ReadConfig) -> list[PciDevice]:
    """Probe every bus, device and function; return those that respond."""
    return [
        PciDevice.probe(read_config, bus, device, function)
        for bus, device, function in itertools.product(range(256), range(32), range(8))
        if (read_config(bus, device, function, 0) & 0xFFFF) != 0xFFFF
    ]