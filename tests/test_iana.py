import pytest

from dhcpwire.iana import (
    Arch,
    Archs,
    EnterpriseID,
    HWType,
    StatusCode,
    arch_name,
    enterprise_name,
    hw_type_name,
    status_code_name,
)
from dhcpwire.wire import UnreadBytesError, WireError


def test_archs_from_bytes():
    archs = Archs.from_bytes(b"\x00\x00\x00\x07")
    assert archs == [Arch.INTEL_X86PC, Arch.EFI_X86_64]
    assert str(archs) == "Intel x86PC, EFI x86-64"


def test_archs_to_bytes_wire_format():
    assert Archs([Arch.EFI_X86_64]).to_bytes() == b"\x00\x07"


def test_archs_round_trip():
    archs = Archs([Arch.EFI_ARM64, Arch.UBOOT_ARM32, Arch.EFI_SUNWAY64])
    assert Archs.from_bytes(archs.to_bytes()) == archs


def test_archs_unknown_value_kept():
    archs = Archs.from_bytes(b"\x03\xe7")
    assert archs == [999]
    assert str(archs) == "unknown"
    assert Archs.from_bytes(archs.to_bytes()) == archs


def test_archs_empty_rejected():
    with pytest.raises(WireError):
        Archs.from_bytes(b"")


def test_archs_odd_length_rejected():
    with pytest.raises(UnreadBytesError):
        Archs.from_bytes(b"\x00\x07\x00")


def test_archs_contains():
    archs = Archs([Arch.EFI_BC, Arch.EFI_IA32])
    assert archs.contains(Arch.EFI_BC)
    assert not archs.contains(Arch.EFI_ARM32)


def test_arch_names():
    assert arch_name(Arch.PPC_OPAL) == "POWER OPAL v3"
    assert str(Arch.EFI_RISCV64_HTTP) == "EFI RISC-V 64-bit boot from HTTP"
    assert arch_name(1000) == "unknown"


def test_enterprise_names():
    assert enterprise_name(EnterpriseID.CIENA_CORPORATION) == "Ciena Corporation"
    assert str(EnterpriseID.CISCO_SYSTEMS) == "Cisco Systems"
    assert enterprise_name(42) == "Unknown"


def test_hw_type_names():
    assert hw_type_name(HWType.ETHERNET) == "Ethernet"
    assert str(HWType.PURE_IP) == "Pure IP"
    assert hw_type_name(0) == "unknown"


def test_status_code_names():
    assert status_code_name(StatusCode.SUCCESS) == "Success"
    assert str(StatusCode.EXCESSIVE_TIME_SKEW) == "ExcessiveTimeSkew"
    assert status_code_name(500) == "Unknown"