from xv6kit.pci import PciDevice, config_address, scan

DEVICE_ID = 0x1234
VENDOR_ID = 0xABCD


def _fake(registers):
    def read(bus, device, function, reg):
        return registers.get((bus, device, function, reg), 0xFFFFFFFF)

    return read


def _device_regs(bus, device, function):
    klass = (2 << 24) | (0 << 16) | (1 << 8) | 3
    return {
        (bus, device, function, 0x00): (DEVICE_ID << 16) | VENDOR_ID,
        (bus, device, function, 0x08): klass,
        (bus, device, function, 0x10): 0xFEB80000,
        (bus, device, function, 0x14): 0xC001,
    }


def test_config_address_enable_bit():
    assert config_address(0, 0, 0, 0) == 0x80000000


def test_config_address_fields():
    addr = config_address(5, 17, 3, 0x10)
    assert (addr >> 16) & 0xFF == 5
    assert (addr >> 11) & 0x1F == 17
    assert (addr >> 8) & 0x7 == 3
    assert addr & 0xFF == 0x10


def test_config_address_masks_inputs():
    assert config_address(0, 0, 0, 0x13) == config_address(0, 0, 0, 0x10)
    assert config_address(0x1FF, 0x3F, 0xF, 0) == config_address(0xFF, 0x1F, 0x7, 0)


def test_probe_decodes_registers():
    dev = PciDevice.probe(_fake(_device_regs(0, 3, 0)), 0, 3, 0)
    assert dev.device_id == DEVICE_ID
    assert dev.vendor_id == VENDOR_ID
    assert (dev.base_class, dev.sub_class, dev.interface, dev.revision_id) == (2, 0, 1, 3)
    assert dev.bar0 == 0xFEB80000
    assert dev.bar1 == 0xC001


def test_scan_finds_present_functions_in_order():
    regs = {}
    regs.update(_device_regs(1, 0, 2))
    regs.update(_device_regs(0, 4, 0))
    found = scan(_fake(regs))
    assert [(d.bus, d.device, d.function) for d in found] == [(0, 4, 0), (1, 0, 2)]


def test_scan_empty_bus():
    assert scan(_fake({})) == []