"""
Module providing facilities for handling struct-like data inside
option payloads.
"""

import abc
import struct

from dhcpv6.exceptions import (
    MalformedField,
    OptionEncodeError,
    StreamEmpty,
    TruncatedField,
)
from dhcpv6.utils import pack_domain_name, pack_ipv6, unpack_ipv6

INT_FORMATS = {8: "b", 16: "h", 32: "i", 64: "q"}

# DHCPv6 is always network byte order
ENDIANNESS = "!"


def read_int(stream, size, signed=False):
    """
    Read (and decode) a big-endian integer number from a binary stream.

    :param stream: an object providing a ``read()`` method
    :param size: the size, in bits, of the number to be read.
        Supported sizes are: 8, 16, 32 and 64 bits.
    :param signed: Whether a signed or unsigned number is required.
        Defaults to ``False`` (unsigned int).
    :return: the read integer number
    """
    fmt = INT_FORMATS.get(size)
    fmt = fmt.lower() if signed else fmt.upper()
    data = read_bytes(stream, size // 8)
    return struct.unpack(ENDIANNESS + fmt, data)[0]


def write_int(number, stream, size, signed=False):
    """
    Write (and encode) a big-endian integer number to a binary stream.

    :param number: the integer number to write
    :param stream: an object providing a ``write()`` method
    :param size: the size, in bits, of the number to be written.
        Supported sizes are: 8, 16, 32 and 64 bits.
    :param signed: Whether a signed or unsigned number is required.
        Defaults to ``False`` (unsigned int).
    :raises: :py:exc:`~dhcpv6.exceptions.OptionEncodeError` if the number
        does not fit in the requested size
    """
    fmt = INT_FORMATS.get(size)
    fmt = fmt.lower() if signed else fmt.upper()
    try:
        data = struct.pack(ENDIANNESS + fmt, number)
    except struct.error as e:
        raise OptionEncodeError(
            "Cannot encode {0!r} as a {1}bit integer".format(number, size)
        ) from e
    write_bytes(stream, data)


def read_bytes(stream, size):
    """
    Read the given amount of raw bytes from a stream.

    :param stream: the stream from which to read data
    :param size: the size to read, in bytes
    :returns: the read data
    :raises: :py:exc:`~dhcpv6.exceptions.StreamEmpty` if zero bytes were read
    :raises: :py:exc:`~dhcpv6.exceptions.TruncatedField` if 0 < bytes < size
        were read
    """

    if size == 0:
        return b""

    data = stream.read(size)
    if len(data) == 0:
        raise StreamEmpty("Zero bytes read from payload")
    if len(data) < size:
        raise TruncatedField(
            "Trying to read {0} bytes, only got {1}".format(size, len(data))
        )
    return data


def write_bytes(stream, data):
    """
    Write the given raw bytes to a stream.

    :param stream: the stream into which to write data
    :param data: the data to write
    """
    if not isinstance(data, (bytes, bytearray)):
        raise OptionEncodeError("{0!r} is not a bytes-like value".format(data))
    stream.write(data)


class StructField(abc.ABC):
    """Abstract base class for payload fields"""

    __slots__ = []

    @abc.abstractmethod
    def load(self, stream, seen=None):
        pass

    @abc.abstractmethod
    def encode(self, value, stream):
        pass

    def coerce(self, value):
        """Normalize a value given by the user to its decoded form"""
        return value

    def __repr__(self):
        return "{0}()".format(self.__class__.__name__)


class IntField(StructField):
    """
    Field containing an unsigned integer number.

    :param size: number size, in bits. Currently supported
        are 8, 16, 32 and 64-bit integers
    """

    __slots__ = ["size"]

    def __init__(self, size):
        self.size = size  # in bits!

    def load(self, stream, seen=None):
        return read_int(stream, self.size)

    def encode(self, number, stream):
        if not isinstance(number, int):
            raise OptionEncodeError("'{}' is not numeric".format(number))
        write_int(number, stream, self.size)

    def __repr__(self):
        return "{0}(size={1!r})".format(self.__class__.__name__, self.size)


class RawBytes(StructField):
    """
    Field containing a fixed-width amount of raw bytes

    :param size: field size, in bytes
    """

    __slots__ = ["size"]

    def __init__(self, size):
        self.size = size  # in bytes!

    def load(self, stream, seen=None):
        return read_bytes(stream, self.size)

    def encode(self, value, stream):
        if len(value) != self.size:
            raise OptionEncodeError(
                "Expected {0} bytes, got {1}".format(self.size, len(value))
            )
        write_bytes(stream, value)

    def coerce(self, value):
        return bytes(value)

    def __repr__(self):
        return "{0}(size={1!r})".format(self.__class__.__name__, self.size)


class RemainingBytes(StructField):
    """Field swallowing whatever is left in the payload, as raw bytes"""

    __slots__ = []

    def load(self, stream, seen=None):
        return stream.read()

    def encode(self, value, stream):
        write_bytes(stream, value)

    def coerce(self, value):
        return bytes(value)


class IPv6AddressField(StructField):
    """Field containing a 16 bytes IPv6 address, decoded to a string"""

    __slots__ = []

    def load(self, stream, seen=None):
        return unpack_ipv6(read_bytes(stream, 16))

    def encode(self, value, stream):
        write_bytes(stream, self._pack(value))

    def coerce(self, value):
        # Bring to canonical (compressed) form, so equality holds
        # after a round trip on the wire
        return unpack_ipv6(self._pack(value))

    @staticmethod
    def _pack(value):
        try:
            return pack_ipv6(str(value))
        except OSError as e:
            raise OptionEncodeError(
                "{0!r} is not a valid IPv6 address".format(value)
            ) from e


class StringField(StructField):
    """Field containing an UTF-8 string, up to the payload end"""

    __slots__ = []

    def load(self, stream, seen=None):
        data = stream.read()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedField("Invalid UTF-8 string: {0!r}".format(data)) from e

    def encode(self, value, stream):
        write_bytes(stream, value.encode("utf-8"))


class OpaqueField(StructField):
    """
    Field containing some opaque data, prefixed by its length as
    a 16bit integer; used in user and vendor class options.
    """

    __slots__ = []

    def load(self, stream, seen=None):
        length = read_int(stream, 16)
        try:
            return read_bytes(stream, length)
        except StreamEmpty:
            raise TruncatedField(
                "Opaque data of {0} bytes is missing".format(length)
            ) from None

    def encode(self, value, stream):
        if len(value) > 0xFFFF:
            raise OptionEncodeError(
                "Opaque data too long: {0} bytes".format(len(value))
            )
        write_int(len(value), stream, 16)
        write_bytes(stream, value)

    def coerce(self, value):
        return bytes(value)


class DomainNameField(StructField):
    """
    Field containing a single domain name, encoded as a sequence of
    length-prefixed labels terminated by the root (empty) label.
    Compression pointers are not allowed in DHCPv6.
    """

    __slots__ = []

    def load(self, stream, seen=None):
        labels = []
        length = read_int(stream, 8)
        while length != 0:
            if length > 63:
                raise MalformedField(
                    "Invalid label length {0} in domain name".format(length)
                )
            try:
                label = read_bytes(stream, length)
                length = read_int(stream, 8)
            except StreamEmpty:
                raise TruncatedField("Domain name not terminated") from None
            try:
                text = label.decode("ascii")
            except UnicodeDecodeError as e:
                raise MalformedField("Invalid label {0!r}".format(label)) from e
            # Would be split in two when encoded back
            if "." in text:
                raise MalformedField("Invalid label {0!r}".format(label))
            labels.append(text)
        return ".".join(labels)

    def encode(self, value, stream):
        try:
            write_bytes(stream, pack_domain_name(value))
        except (ValueError, UnicodeEncodeError) as e:
            raise OptionEncodeError(str(e)) from e

    def coerce(self, value):
        return value.rstrip(".")


class ListField(StructField):
    """
    A list field is a variable amount of fields of some other type.
    Used for options carrying multiple "items", such as a list of
    name server addresses.

    It will keep loading data using a subfield until a
    :py:exc:`~dhcpv6.exceptions.StreamEmpty` exception is raised, indicating
    we reached the end of the payload.

    Values are returned in a list.

    :param subfield: a :py:class:`StructField` sub-class instance to be
        used to read values from the stream.
    """

    __slots__ = ["subfield"]

    def __init__(self, subfield):
        self.subfield = subfield

    def load(self, stream, seen=None):
        return list(self._iter_load(stream))

    def _iter_load(self, stream):
        while True:
            try:
                yield self.subfield.load(stream)
            except StreamEmpty:
                return

    def encode(self, list_data, stream):
        for rec in list_data:
            self.subfield.encode(rec, stream)

    def coerce(self, value):
        return [self.subfield.coerce(x) for x in value]

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.subfield)


def struct_decode(schema, stream):
    """
    Decode structured data from a stream, following a schema.

    :param schema:
        a list of three tuples: ``(name, field, default)``, where ``name`` is a
        string representing the attribute name, and ``field`` is an instance of
        a :py:class:`StructField` sub-class, providing a ``.load()`` method to
        be called on the stream to get the field value. ``default`` is used
        when manually instantiating an option, but is ignored here.

    :param stream:
        a file-like object, providing a ``.read()`` method, from which data
        will be read.

    :return:
        a dictionary mapping the field names to decoded data
    :raises: :py:exc:`~dhcpv6.exceptions.TruncatedField` if the stream
        ends before all the fields are read
    """

    decoded = {}
    for name, field, default in schema:
        try:
            decoded[name] = field.load(stream, seen=decoded)
        except StreamEmpty:
            raise TruncatedField(
                "Payload ended before field '{0}'".format(name)
            ) from None
    return decoded


def struct_encode(schema, values, outstream):
    """
    Encode structured data to a stream.

    :param values: a mapping of field names to (decoded) values
    """
    for name, field, default in schema:
        field.encode(values[name], outstream)
