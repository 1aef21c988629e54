import pytest

from dhcpv6.utils import (
    format_payload,
    pack_domain_name,
    pack_ipv6,
    pack_macaddr,
    unpack_ipv6,
    unpack_macaddr,
)


def test_unpack_ipv6():
    assert (
        unpack_ipv6(b"\x00\x11\x22\x33\x44\x55\x66\x77\x88\x99\xaa\xbb\xcc\xdd\xee\xff")
        == "11:2233:4455:6677:8899:aabb:ccdd:eeff"
    )
    assert unpack_ipv6(b"\x20\x01\x0d\xb8" + b"\x00" * 11 + b"\x01") == "2001:db8::1"


def test_pack_ipv6():
    assert pack_ipv6("2001:db8::1") == b"\x20\x01\x0d\xb8" + b"\x00" * 11 + b"\x01"
    assert pack_ipv6("::") == b"\x00" * 16


def test_unpack_macaddr():
    assert unpack_macaddr(b"\x00\x11\x22\xaa\xbb\xcc") == "00:11:22:aa:bb:cc"


def test_pack_macaddr():
    assert pack_macaddr("00:11:22:aa:bb:cc") == b"\x00\x11\x22\xaa\xbb\xcc"


def test_pack_domain_name():
    assert pack_domain_name("example.com") == b"\x07example\x03com\x00"
    assert pack_domain_name("example.com.") == b"\x07example\x03com\x00"
    assert pack_domain_name("") == b"\x00"
    assert pack_domain_name(".") == b"\x00"


@pytest.mark.parametrize("name", ["a..b", "x" * 64 + ".com", ("x" * 60 + ".") * 5])
def test_pack_domain_name_invalid(name):
    with pytest.raises(ValueError):
        pack_domain_name(name)


def test_format_payload():
    assert format_payload(b"") == ""
    assert format_payload(b"\x00\xaa\x0f") == "00 aa 0f"
