import pytest

from dhcpwire.types import (
    MessageType,
    OptionCode,
    TransactionID,
    message_type_name,
    option_code_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (MessageType.SOLICIT, "SOLICIT"),
        (MessageType.ADVERTISE, "ADVERTISE"),
        (MessageType.INFORMATION_REQUEST, "INFORMATION-REQUEST"),
        (MessageType.RELAY_FORWARD, "RELAY-FORW"),
        (MessageType.RELAY_REPLY, "RELAY-REPL"),
        (MessageType.LEASE_QUERY_DATA, "LEASEQUERY-DATA"),
        (MessageType.DHCPV4_RESPONSE, "DHCPv4-RESPONSE"),
    ],
)
def test_message_type_names(value, expected):
    assert message_type_name(value) == expected
    assert str(value) == expected


def test_message_type_wire_values():
    assert MessageType(1) is MessageType.SOLICIT
    assert MessageType(13) is MessageType.RELAY_REPLY
    assert MessageType(20) is MessageType.DHCPV4_QUERY


@pytest.mark.parametrize("value", [18, 19, 200])
def test_message_type_unknown(value):
    assert message_type_name(value) == f"unknown ({value})"
    with pytest.raises(ValueError):
        MessageType(value)


def test_message_type_none_has_no_name():
    assert message_type_name(MessageType.NONE) == "unknown (0)"
    assert message_type_name(0) == "unknown (0)"
    assert str(MessageType.NONE) == "unknown (0)"


def test_every_real_message_type_is_named():
    for member in MessageType:
        if member is MessageType.NONE:
            continue
        assert not message_type_name(member).startswith("unknown")


@pytest.mark.parametrize(
    "value, expected",
    [
        (OptionCode.CLIENT_ID, "Client ID"),
        (OptionCode.IATA, "IATA"),
        (OptionCode.USER_CLASS, "User Class"),
        (OptionCode.VENDOR_CLASS, "Vendor Class"),
        (OptionCode.VENDOR_OPTS, "Vendor Options"),
        (OptionCode.DNS_RECURSIVE_NAME_SERVER, "DNS"),
        (OptionCode.FOUR_RD, "4RD"),
        (OptionCode.RELAY_PORT, "Relay Source Port"),
    ],
)
def test_option_code_names(value, expected):
    assert option_code_name(value) == expected
    assert str(value) == expected


def test_option_code_wire_values():
    assert OptionCode(4) is OptionCode.IATA
    assert OptionCode(17) is OptionCode.VENDOR_OPTS
    assert OptionCode(143) is OptionCode.IPV6_ADDRESS_ANDSF


@pytest.mark.parametrize("value", [10, 35, 140])
def test_option_code_unknown(value):
    assert option_code_name(value) == f"unknown ({value})"
    with pytest.raises(ValueError):
        OptionCode(value)


def test_every_option_code_is_named():
    for member in OptionCode:
        assert not option_code_name(member).startswith("unknown")


def test_option_code_name_accepts_plain_int():
    assert option_code_name(int(OptionCode.IAPD)) == "IAPD"


def test_format_uses_name_but_numeric_specs_use_value():
    assert option_code_name(OptionCode.USER_CLASS) == "User Class"
    assert f"{OptionCode.USER_CLASS}: x" == "User Class: x"
    assert f"{OptionCode.USER_CLASS:d}" == "15"
    assert message_type_name(MessageType.REPLY) == "REPLY"
    assert f"{MessageType.REPLY}" == "REPLY"


def test_transaction_id_str():
    xid = TransactionID(b"\xab\xcd\xef")
    assert str(xid) == "0xabcdef"


def test_transaction_id_default_is_zero():
    assert TransactionID() == bytes(3)


def test_transaction_id_behaves_as_bytes():
    xid = TransactionID(bytearray(b"\x01\x02\x03"))
    assert xid == b"\x01\x02\x03"
    assert list(xid) == [1, 2, 3]
    assert TransactionID(bytes(xid)) == xid


@pytest.mark.parametrize("data", [b"", b"\x01\x02", b"\x01\x02\x03\x04"])
def test_transaction_id_wrong_length(data):
    with pytest.raises(ValueError):
        TransactionID(data)