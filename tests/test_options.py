import pytest

from dhcpwire.options import (
    OptIATA,
    OptionGeneric,
    Options,
    OptUserClass,
    OptVendorClass,
    OptVendorOpts,
    parse_option,
    vendor_parse_option,
)
from dhcpwire.types import OptionCode
from dhcpwire.wire import BufferTooShortError, UnreadBytesError

ADDR_PAYLOAD = bytes(
    [
        0x24, 1, 0xDB, 0, 0x30, 0x10, 0xC0, 0x8F,
        0xFA, 0xCE, 0, 0, 0, 0x44, 0, 0,
        0, 0, 0, 2,
        0, 0, 0, 4,
    ]
)
ADDR_OPTION = bytes([0, 5, 0, 0x18]) + ADDR_PAYLOAD
IATA_ONE = bytes([0, 4, 0, 32, 1, 0, 0, 0]) + ADDR_OPTION
IATA_TWO = bytes([0, 4, 0, 32, 1, 2, 3, 4]) + ADDR_OPTION
IATA_TRUNCATED = (
    bytes([0, 4, 0, 28, 1, 0, 0, 0, 0, 5, 0, 0x18])
    + ADDR_PAYLOAD[:16]
    + bytes([0, 0, 0xB2, 0x7A])
)


def _iata(ia_id):
    return OptIATA(ia_id=ia_id, options=Options([OptionGeneric(5, ADDR_PAYLOAD)]))


def _vendor_opt(options, number):
    for opt in options.get(OptionCode.VENDOR_OPTS):
        if opt.enterprise_number == number:
            return opt.vendor_opts
    return None


def _vendor_class(options, number):
    for opt in options.get(OptionCode.VENDOR_CLASS):
        if opt.enterprise_number == number:
            return opt.data
    return None


@pytest.mark.parametrize(
    "buf, want",
    [
        (IATA_ONE, [_iata(bytes([1, 0, 0, 0]))]),
        (IATA_ONE + IATA_TWO, [_iata(bytes([1, 0, 0, 0])), _iata(bytes([1, 2, 3, 4]))]),
        (b"", []),
    ],
)
def test_iata_parse_and_getter(buf, want):
    mo = Options.from_bytes(buf)
    assert mo.get(OptionCode.IATA) == want
    assert mo.get_one(OptionCode.IATA) == (want[0] if want else None)
    if want:
        assert Options(want).to_bytes() == buf


@pytest.mark.parametrize(
    "buf, error",
    [
        (bytes([0, 4, 0, 1, 0]), UnreadBytesError),
        (bytes([0, 4, 0, 3, 1, 0, 0]), UnreadBytesError),
        (IATA_TRUNCATED, BufferTooShortError),
    ],
)
def test_iata_parse_errors(buf, error):
    with pytest.raises(error):
        Options.from_bytes(buf)


def test_iata_get_one_option():
    addr = OptionGeneric(OptionCode.IA_ADDR, b"\x01")
    opt = OptIATA(options=Options([OptionGeneric(OptionCode.STATUS_CODE), addr]))
    assert opt.options.get_one(OptionCode.IA_ADDR) is addr


def test_iata_add_option():
    opt = OptIATA()
    opt.options.add(OptionGeneric(OptionCode.ELAPSED_TIME, b"\x00\x00"))
    assert len(opt.options) == 1
    assert opt.options[0].code == OptionCode.ELAPSED_TIME


def test_iata_get_one_option_missing():
    opt = OptIATA(
        options=Options([OptionGeneric(OptionCode.STATUS_CODE), OptionGeneric(OptionCode.IA_ADDR)])
    )
    assert opt.options.get_one(OptionCode.DNS_RECURSIVE_NAME_SERVER) is None


def test_iata_delete_option():
    addr = OptionGeneric(OptionCode.IA_ADDR)
    status = OptionGeneric(OptionCode.STATUS_CODE)
    first = OptIATA(options=Options([status, addr, addr]))
    first.options.delete(OptionCode.IA_ADDR)
    assert first.options == [status]
    second = OptIATA(options=Options([addr, status, addr]))
    second.options.delete(OptionCode.IA_ADDR)
    assert second.options == [status]


def test_iata_string():
    data = (
        bytes([1, 0, 0, 0, 0, 5, 0, 0x18])
        + ADDR_PAYLOAD[:16]
        + bytes([0, 0, 0xB2, 0x7A, 0, 0, 0xC0, 0x8A])
    )
    opt = OptIATA.parse(data)
    text = str(opt)
    assert "IAID=0x01000000" in text
    assert "Options={" in text


def test_iata_rejects_bad_iaid_length():
    with pytest.raises(ValueError):
        OptIATA(ia_id=b"\x01\x02")


@pytest.mark.parametrize(
    "buf, want",
    [
        (
            bytes([0, 15, 0, 19, 0, 8]) + b"bladibla" + bytes([0, 7]) + b"foo=bar",
            [b"bladibla", b"foo=bar"],
        ),
        (b"", None),
    ],
)
def test_user_class_parse_and_getter(buf, want):
    mo = Options.from_bytes(buf)
    found = mo.get_one(OptionCode.USER_CLASS)
    assert (found.user_classes if found else None) == want
    if want is not None:
        assert Options([OptUserClass(want)]).to_bytes() == buf


@pytest.mark.parametrize(
    "buf, error",
    [
        (bytes([0, 15, 0, 0]), BufferTooShortError),
        (bytes([0, 15, 0]), UnreadBytesError),
    ],
)
def test_user_class_errors(buf, error):
    with pytest.raises(error):
        Options.from_bytes(buf)


def test_user_class_string():
    data = bytes([0, 9]) + b"linuxboot" + bytes([0, 4]) + b"test"
    opt = OptUserClass.parse(data)
    assert "User Class: [linuxboot, test]" in str(opt)


VENDOR_OPTS_BUF = bytes(
    [
        0, 17, 0, 10, 0, 0, 0, 16, 0, 5, 0, 2, 0xA, 0xB,
        0, 17, 0, 9, 0, 0, 0, 14, 0, 9, 0, 1, 0xA,
    ]
)


@pytest.mark.parametrize(
    "buf, want",
    [
        (
            VENDOR_OPTS_BUF,
            [
                OptVendorOpts(16, Options([OptionGeneric(5, b"\x0a\x0b")])),
                OptVendorOpts(14, Options([OptionGeneric(9, b"\x0a")])),
            ],
        ),
        (b"", []),
    ],
)
def test_vendor_opts_parse_and_getter(buf, want):
    mo = Options.from_bytes(buf)
    assert mo.get(OptionCode.VENDOR_OPTS) == want
    for vo in want:
        assert _vendor_opt(mo, vo.enterprise_number) == vo.vendor_opts
    assert _vendor_opt(mo, 100) is None
    if want:
        assert Options(want).to_bytes() == buf


@pytest.mark.parametrize("buf", [bytes([0, 17, 0, 1, 0]), bytes([0, 17, 0])])
def test_vendor_opts_errors(buf):
    with pytest.raises(UnreadBytesError):
        Options.from_bytes(buf)


def test_vendor_opts_keeps_sub_options_generic():
    opt = OptVendorOpts.parse(bytes([0, 0, 0, 7, 0, 4, 0, 1, 0xFF]))
    assert opt.vendor_opts == [OptionGeneric(4, b"\xff")]
    assert isinstance(opt.vendor_opts[0], OptionGeneric)
    assert str(opt) == "Vendor Options: {EnterpriseNumber=7 VendorOptions=[IATA: [255]]}"


def test_vendor_class_parse_and_getter():
    buf = bytes([0, 16, 0, 14, 0, 0, 0, 16, 0, 4]) + b"SLAM" + bytes([0, 2]) + b"hh"
    want = [OptVendorClass(16, [b"SLAM", b"hh"])]
    mo = Options.from_bytes(buf)
    assert mo.get(OptionCode.VENDOR_CLASS) == want
    assert _vendor_class(mo, 16) == [b"SLAM", b"hh"]
    assert _vendor_class(mo, 100) is None
    assert Options(want).to_bytes() == buf


@pytest.mark.parametrize(
    "buf, error",
    [
        (bytes([0, 16, 0, 0]), BufferTooShortError),
        (bytes([0, 16, 0, 4, 0, 0, 0, 6]), BufferTooShortError),
        (bytes([0, 16, 0]), UnreadBytesError),
    ],
)
def test_vendor_class_errors(buf, error):
    with pytest.raises(error):
        Options.from_bytes(buf)


def test_vendor_class_string():
    data = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0, 9]) + b"linuxboot" + bytes([0, 4]) + b"test"
    text = str(OptVendorClass.parse(data))
    assert "EnterpriseNumber=2864434397" in text
    assert "Data=[linuxboot, test]" in text


def test_option_generic_string():
    assert str(OptionGeneric(400)) == "unknown (400)"
    assert str(OptionGeneric(OptionCode.ELAPSED_TIME, b"\x01\x02")) == "Elapsed Time: [1 2]"


def test_parse_option_dispatch():
    assert parse_option(OptionCode.USER_CLASS, bytes([0, 1]) + b"a") == OptUserClass([b"a"])
    assert parse_option(200, b"xy") == OptionGeneric(200, b"xy")
    assert vendor_parse_option(OptionCode.IATA, b"\x01") == OptionGeneric(4, b"\x01")


def test_options_long_string():
    assert Options().long_string(0) == "[]"
    simple = Options([OptionGeneric(OptionCode.ELAPSED_TIME, b"\x01\x02")])
    assert simple.long_string(0) == "[\n  Elapsed Time: [1 2]\n]"
    nested = Options(
        [OptIATA(ia_id=b"\x01\x02\x03\x04", options=Options([OptionGeneric(5)]))]
    )
    expected = "[\n  IATA: IAID=0x01020304 Options=[\n    IA IP Address\n  ]\n]"
    assert nested.long_string(0) == expected


def test_options_update():
    first = OptionGeneric(OptionCode.ELAPSED_TIME, b"\x00\x01")
    other = OptionGeneric(OptionCode.PREFERENCE, b"\x05")
    opts = Options([first, other])
    replacement = OptionGeneric(OptionCode.ELAPSED_TIME, b"\x00\x02")
    opts.update(replacement)
    assert opts == [replacement, other]
    added = OptionGeneric(OptionCode.RAPID_COMMIT)
    opts.update(added)
    assert opts == [replacement, other, added]


def test_options_custom_parser_round_trip():
    opts = Options.from_bytes(IATA_ONE, vendor_parse_option)
    assert opts == [OptionGeneric(4, IATA_ONE[4:])]
    assert opts.to_bytes() == IATA_ONE