import socket
import struct


def pack_ipv6(data):
    # type: (str) -> bytes
    return socket.inet_pton(socket.AF_INET6, data)


def unpack_ipv6(data):
    # type: (bytes) -> str
    return socket.inet_ntop(socket.AF_INET6, data)


def pack_macaddr(data):
    # type: (str) -> bytes
    a = [int(x, 16) for x in data.split(":")]
    return struct.pack("!6B", *a)


def unpack_macaddr(data):
    # type: (bytes) -> str
    return ":".join(format(x, "02x") for x in data)


def pack_domain_name(name):
    # type: (str) -> bytes
    """
    Pack a domain name in the uncompressed RFC 1035 wire format used by
    DHCPv6 (RFC 8415, section 10).

    Each label is prefixed with its length, and the name is terminated
    by a zero-length label::

        >>> pack_domain_name("example.com")
        b'\\x07example\\x03com\\x00'

    A trailing dot is accepted and ignored; the empty name (or ``"."``)
    packs to the root label alone.
    """
    name = name.rstrip(".")
    packed = b""
    if name:
        for label in name.split("."):
            raw = label.encode("ascii")
            if not 0 < len(raw) < 64:
                raise ValueError(
                    "Invalid label {0!r} in domain name {1!r}".format(label, name)
                )
            packed += struct.pack("!B", len(raw)) + raw
    packed += b"\x00"
    if len(packed) > 255:
        raise ValueError("Domain name too long: {0!r}".format(name))
    return packed


def format_payload(data):
    # type: (bytes) -> str
    """Render raw bytes as space-separated hex pairs, for humans"""
    return " ".join(format(x, "02x") for x in data)
