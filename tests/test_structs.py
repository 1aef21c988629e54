"""
Test unpacking structs
"""

import io
import struct

import pytest

from dhcpv6.exceptions import (
    MalformedField,
    OptionEncodeError,
    StreamEmpty,
    TruncatedField,
)
from dhcpv6.structs import (
    DomainNameField,
    IntField,
    IPv6AddressField,
    ListField,
    OpaqueField,
    RawBytes,
    RemainingBytes,
    StringField,
    read_bytes,
    read_int,
    struct_decode,
    struct_encode,
    write_int,
)


def test_read_int():
    assert read_int(io.BytesIO(b"\x12\x34"), 16) == 0x1234
    assert read_int(io.BytesIO(b"\x12\x34extra"), 16) == 0x1234

    # 16bit, signed, negative
    assert read_int(io.BytesIO(b"\xed\xcc"), 16, True) == -0x1234

    # 16bit, unsigned
    assert read_int(io.BytesIO(b"\xed\xcc"), 16) == 0xEDCC

    assert read_int(io.BytesIO(b"\x12"), 8) == 0x12
    assert read_int(io.BytesIO(b"\x12\x34\x56\x78"), 32) == 0x12345678
    assert read_int(io.BytesIO(b"\x00\x00\x00\x00\x12\x34\x56\x78"), 64) == 0x12345678


def test_read_int_empty_stream():
    with pytest.raises(StreamEmpty):
        read_int(io.BytesIO(b""), 32)


def test_read_int_truncated_stream():
    with pytest.raises(TruncatedField):
        read_int(io.BytesIO(b"AB"), 32)


def test_write_int():
    stream = io.BytesIO()
    write_int(0x1234, stream, 16)
    write_int(0xAB, stream, 8)
    assert stream.getvalue() == b"\x12\x34\xab"


def test_write_int_out_of_range():
    with pytest.raises(OptionEncodeError):
        write_int(0x10000, io.BytesIO(), 16)
    with pytest.raises(OptionEncodeError):
        write_int(-1, io.BytesIO(), 32)


def test_read_bytes():
    data = io.BytesIO(b"foobar")
    assert read_bytes(data, 3) == b"foo"
    assert read_bytes(data, 3) == b"bar"

    data = io.BytesIO(b"foo")
    with pytest.raises(TruncatedField):
        read_bytes(data, 4)

    data = io.BytesIO(b"")
    with pytest.raises(StreamEmpty):
        read_bytes(data, 4)

    data = io.BytesIO(b"")
    assert read_bytes(data, 0) == b""


def test_decode_simple_struct():
    schema = [
        ("rawbytes", RawBytes(12), b""),
        ("int32u", IntField(32), 0),
        ("int16u", IntField(16), 0),
        ("address", IPv6AddressField(), None),
        ("rest", RemainingBytes(), b""),
    ]

    stream = io.BytesIO()
    stream.write(b"Hello world!")
    stream.write(struct.pack(">I", 1234))
    stream.write(struct.pack(">H", 789))
    stream.write(b"\xfe\x80" + b"\x00" * 13 + b"\x01")
    stream.write(b"trailing")

    stream.seek(0)
    decoded = struct_decode(schema, stream)

    assert decoded["rawbytes"] == b"Hello world!"
    assert decoded["int32u"] == 1234
    assert decoded["int16u"] == 789
    assert decoded["address"] == "fe80::1"
    assert decoded["rest"] == b"trailing"

    outstream = io.BytesIO()
    struct_encode(schema, decoded, outstream)
    assert outstream.getvalue() == stream.getvalue()


def test_decode_struct_short_payload():
    schema = [("iaid", IntField(32), 0), ("t1", IntField(32), 0)]
    with pytest.raises(TruncatedField) as ctx:
        struct_decode(schema, io.BytesIO(b"\x00\x00\x00\x01"))
    assert str(ctx.value) == "Payload ended before field 't1'"

    with pytest.raises(TruncatedField):
        struct_decode(schema, io.BytesIO(b"\x00\x00\x00\x01\x00\x00"))


def test_string_field():
    assert StringField().load(io.BytesIO("Ciao, mondo".encode("utf-8"))) == (
        "Ciao, mondo"
    )
    assert StringField().load(io.BytesIO(b"")) == ""

    with pytest.raises(MalformedField):
        StringField().load(io.BytesIO(b"\xff\xfe"))


def test_opaque_field_list():
    field = ListField(OpaqueField())
    data = b"\x00\x03foo" b"\x00\x00" b"\x00\x06barbaz"
    assert field.load(io.BytesIO(data)) == [b"foo", b"", b"barbaz"]

    stream = io.BytesIO()
    field.encode([b"foo", b"", b"barbaz"], stream)
    assert stream.getvalue() == data


def test_opaque_field_truncated():
    with pytest.raises(TruncatedField):
        ListField(OpaqueField()).load(io.BytesIO(b"\x00\x03foo\x00\x05ab"))
    with pytest.raises(TruncatedField):
        ListField(OpaqueField()).load(io.BytesIO(b"\x00\x03foo\x00\x05"))
    with pytest.raises(TruncatedField):
        ListField(OpaqueField()).load(io.BytesIO(b"\x00\x03foo\x00"))


def test_ipv6_list_field():
    field = ListField(IPv6AddressField())
    addr1 = b"\x20\x01\x0d\xb8" + b"\x00" * 11 + b"\x01"
    addr2 = b"\x20\x01\x0d\xb8" + b"\x00" * 11 + b"\x02"
    data = addr1 + addr2
    assert field.load(io.BytesIO(data)) == ["2001:db8::1", "2001:db8::2"]
    assert field.load(io.BytesIO(b"")) == []

    with pytest.raises(TruncatedField):
        field.load(io.BytesIO(data + b"\x20"))


def test_ipv6_field_coerce():
    field = IPv6AddressField()
    assert field.coerce("2001:0DB8:0000::0001") == "2001:db8::1"

    with pytest.raises(OptionEncodeError):
        field.coerce("not-an-address")
    with pytest.raises(OptionEncodeError):
        field.coerce("10.0.0.1")


def test_domain_name_field():
    field = ListField(DomainNameField())
    data = b"\x07example\x03com\x00" b"\x04corp\x07example\x03net\x00"
    assert field.load(io.BytesIO(data)) == ["example.com", "corp.example.net"]

    stream = io.BytesIO()
    field.encode(["example.com", "corp.example.net"], stream)
    assert stream.getvalue() == data


def test_domain_name_field_root():
    assert DomainNameField().load(io.BytesIO(b"\x00")) == ""


@pytest.mark.parametrize(
    "data, exception",
    [
        (b"\x07example\x03com", TruncatedField),  # missing terminator
        (b"\x07exam", TruncatedField),
        (b"\xc0\x0c", MalformedField),  # compression pointer
        (b"\x02\xff\xfe\x00", MalformedField),
    ],
)
def test_domain_name_field_invalid(data, exception):
    with pytest.raises(exception):
        DomainNameField().load(io.BytesIO(data))


def test_domain_name_field_dotted_label():
    # A single "a.b" label cannot be told apart from "a" + "b" once joined
    with pytest.raises(MalformedField):
        DomainNameField().load(io.BytesIO(b"\x03a.b\x00"))
    with pytest.raises(MalformedField):
        ListField(DomainNameField()).load(io.BytesIO(b"\x01a\x00\x04x.yz\x00"))


def test_domain_name_field_encode_invalid():
    with pytest.raises(OptionEncodeError):
        DomainNameField().encode("a..b", io.BytesIO())


def test_int_field_encode_not_numeric():
    with pytest.raises(OptionEncodeError):
        IntField(16).encode("1", io.BytesIO())


def test_raw_bytes_wrong_size():
    with pytest.raises(OptionEncodeError):
        RawBytes(4).encode(b"abc", io.BytesIO())
