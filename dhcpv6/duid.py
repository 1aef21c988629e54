"""
DHCP Unique Identifiers (RFC 8415, section 11).

A DUID is carried by the client and server identifier options. It starts
with a 16bit type code, followed by a type-dependent body. Types that are
not known here are kept verbatim as :py:class:`DuidOpaque`.
"""

import io
import uuid
from collections import namedtuple

from dhcpv6.constants.duid_types import (
    DUID_EN,
    DUID_LL,
    DUID_LLT,
    DUID_TYPE_NAMES,
    DUID_UUID,
)
from dhcpv6.exceptions import (
    MalformedField,
    OptionEncodeError,
    StreamEmpty,
    TruncatedField,
)
from dhcpv6.structs import (
    StructField,
    read_bytes,
    read_int,
    write_bytes,
    write_int,
)
from dhcpv6.utils import format_payload, unpack_macaddr

KNOWN_DUIDS = {}

# RFC 8415 hardware type for Ethernet, as assigned by IANA for ARP
HWTYPE_ETHERNET = 1


def register_duid(duid_class):
    """Handy decorator to register a new known DUID type"""
    KNOWN_DUIDS[duid_class.duid_type] = duid_class
    return duid_class


def _format_lladdr(hardware_type, address):
    if hardware_type == HWTYPE_ETHERNET and len(address) == 6:
        return unpack_macaddr(address)
    return format_payload(address)


@register_duid
class DuidLLT(namedtuple("DuidLLT", ("hardware_type", "time", "link_layer_address"))):
    """Link-layer address plus time; ``time`` counts seconds since 2000-01-01"""

    __slots__ = ()
    duid_type = DUID_LLT

    def pack(self):
        stream = io.BytesIO()
        write_int(self.duid_type, stream, 16)
        write_int(self.hardware_type, stream, 16)
        write_int(self.time, stream, 32)
        write_bytes(stream, self.link_layer_address)
        return stream.getvalue()

    @classmethod
    def unpack_body(cls, stream):
        hardware_type = read_int(stream, 16)
        time = read_int(stream, 32)
        return cls(hardware_type, time, stream.read())

    def __str__(self):
        return "DUID-LLT(hwtype={0}, time={1}, lladdr={2})".format(
            self.hardware_type,
            self.time,
            _format_lladdr(self.hardware_type, self.link_layer_address),
        )


@register_duid
class DuidEN(namedtuple("DuidEN", ("enterprise_number", "identifier"))):
    __slots__ = ()
    duid_type = DUID_EN

    def pack(self):
        stream = io.BytesIO()
        write_int(self.duid_type, stream, 16)
        write_int(self.enterprise_number, stream, 32)
        write_bytes(stream, self.identifier)
        return stream.getvalue()

    @classmethod
    def unpack_body(cls, stream):
        enterprise_number = read_int(stream, 32)
        return cls(enterprise_number, stream.read())

    def __str__(self):
        return "DUID-EN(enterprise={0}, id={1})".format(
            self.enterprise_number, format_payload(self.identifier)
        )


@register_duid
class DuidLL(namedtuple("DuidLL", ("hardware_type", "link_layer_address"))):
    __slots__ = ()
    duid_type = DUID_LL

    def pack(self):
        stream = io.BytesIO()
        write_int(self.duid_type, stream, 16)
        write_int(self.hardware_type, stream, 16)
        write_bytes(stream, self.link_layer_address)
        return stream.getvalue()

    @classmethod
    def unpack_body(cls, stream):
        hardware_type = read_int(stream, 16)
        return cls(hardware_type, stream.read())

    def __str__(self):
        return "DUID-LL(hwtype={0}, lladdr={1})".format(
            self.hardware_type,
            _format_lladdr(self.hardware_type, self.link_layer_address),
        )


@register_duid
class DuidUUID(namedtuple("DuidUUID", ("uuid",))):
    """DUID based on an UUID (RFC 6355); the body is exactly 16 bytes"""

    __slots__ = ()
    duid_type = DUID_UUID

    def pack(self):
        stream = io.BytesIO()
        write_int(self.duid_type, stream, 16)
        write_bytes(stream, self.uuid.bytes)
        return stream.getvalue()

    @classmethod
    def unpack_body(cls, stream):
        value = read_bytes(stream, 16)
        if stream.read():
            raise MalformedField("DUID-UUID body longer than 16 bytes")
        return cls(uuid.UUID(bytes=value))

    def __str__(self):
        return "DUID-UUID({0})".format(self.uuid)


class DuidOpaque(namedtuple("DuidOpaque", ("duid_type", "data"))):
    """A DUID whose type is not known; the body is kept as raw bytes"""

    __slots__ = ()

    def pack(self):
        stream = io.BytesIO()
        write_int(self.duid_type, stream, 16)
        write_bytes(stream, self.data)
        return stream.getvalue()

    def __str__(self):
        return "{0}(data={1})".format(
            duid_type_name(self.duid_type), format_payload(self.data)
        )


def unpack_duid(data):
    """
    Decode a DUID from raw bytes.

    :raises: :py:exc:`~dhcpv6.exceptions.TruncatedField` if the data is
        too short to hold the DUID type (or the type-specific fields)
    """
    if len(data) < 2:
        raise TruncatedField("DUID must be at least 2 bytes, got {0}".format(len(data)))
    stream = io.BytesIO(data)
    duid_type = read_int(stream, 16)
    try:
        duid_class = KNOWN_DUIDS[duid_type]
    except KeyError:
        return DuidOpaque(duid_type, stream.read())
    try:
        return duid_class.unpack_body(stream)
    except StreamEmpty:
        raise TruncatedField(
            "{0} body is missing".format(duid_type_name(duid_type))
        ) from None


def pack_duid(duid):
    if not hasattr(duid, "pack"):
        raise OptionEncodeError("{0!r} is not a DUID".format(duid))
    return duid.pack()


def duid_type_name(duid_type):
    return DUID_TYPE_NAMES.get(duid_type, "DUID-{0}".format(duid_type))


class DUIDField(StructField):
    """Field containing a DUID, up to the payload end"""

    __slots__ = []

    def load(self, stream, seen=None):
        return unpack_duid(stream.read())

    def encode(self, value, stream):
        write_bytes(stream, pack_duid(value))

    def coerce(self, value):
        if not hasattr(value, "pack"):
            raise OptionEncodeError("{0!r} is not a DUID".format(value))
        return value
