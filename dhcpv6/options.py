"""
Module containing the TLV framing of DHCPv6 options.

Each option on the wire is in the form:

- option code (uint16, network byte order)
- payload length (uint16, network byte order), not counting this header
- payload (``length`` bytes)

Options are laid out one after the other, with no padding. Option codes
are routed to a type-specific decoder through a registry; codes with no
registered decoder are kept verbatim as :py:class:`GenericOption`, so
they survive a decode/encode round trip untouched.
"""

import io
import logging
import struct

from dhcpv6 import strictness as strictness
from dhcpv6.constants import MAX_OPTION_LENGTH, OPTION_HEADER_SIZE, option_name
from dhcpv6.exceptions import (
    LengthMismatch,
    OptionEncodeError,
    OptionPayloadError,
    OverrunError,
    TruncatedHeader,
    TruncatedPayload,
)
from dhcpv6.structs import RemainingBytes, StructField, struct_decode, struct_encode
from dhcpv6.structs import write_bytes
from dhcpv6.utils import format_payload

logger = logging.getLogger(__name__)

OPTION_HEADER = struct.Struct("!HH")

# Decoders for known option codes: {<code>: decoder(payload) -> Option}
KNOWN_OPTIONS = {}


def register_decoder(code, decoder):
    """Route the given option code to ``decoder(payload)``"""
    KNOWN_OPTIONS[code] = decoder


def unregister_decoder(code):
    KNOWN_OPTIONS.pop(code, None)


def register_option(option_class):
    """Handy decorator to register a new known option type"""
    register_decoder(option_class.code, option_class.decode)
    return option_class


class Option(object):
    """
    Base class for options.

    Typed options declare their payload layout in ``schema``, a list of
    ``(name, field, default)`` triples; fields are then accessible as
    attributes. Options are immutable once built.

    They can be created either from keyword arguments, or by decoding a
    payload with :py:meth:`decode`.
    """

    code = None
    schema = []
    __slots__ = ["_decoded", "_payload"]

    def __init__(self, **kwargs):
        building = "raw" not in kwargs
        if not building:
            decoded = struct_decode(self.schema, io.BytesIO(kwargs["raw"]))
            # This code gets called when reading from the wire. We don't
            # want to potentially abort in this case, just warn
            report = strictness.warn
        else:
            decoded = {}
            for key, field, default in self.schema:
                value = kwargs.pop(key, default)
                if value is None:
                    raise TypeError(
                        "{0}() missing required argument '{1}'".format(
                            self.__class__.__name__, key
                        )
                    )
                decoded[key] = field.coerce(value)
            if kwargs:
                raise TypeError(
                    "{0}() got unexpected arguments: {1}".format(
                        self.__class__.__name__, ", ".join(sorted(kwargs))
                    )
                )
            report = strictness.problem
        object.__setattr__(self, "_decoded", decoded)
        object.__setattr__(self, "_payload", None)
        self._check(report)
        # Decoded options must keep their wire form untouched
        if building and strictness.should_fix():
            self._fix()
            object.__setattr__(self, "_payload", None)

    @classmethod
    def decode(cls, payload):
        """Build an option of this type out of its raw payload"""
        return cls(raw=payload)

    def _check(self, report):
        """
        Hook for sanity checks on field values; ``report`` is called with
        a message for each problem found.
        """
        pass

    def _fix(self):
        """Hook fixing questionable field values, if possible"""
        pass

    @property
    def name(self):
        return option_name(self.code)

    def encode_payload(self):
        """Encodes the fields of this option into raw payload data"""
        # Cached, options are immutable
        if self._payload is None:
            outstream = io.BytesIO()
            struct_encode(self.schema, self._decoded, outstream)
            object.__setattr__(self, "_payload", outstream.getvalue())
        return self._payload

    def length(self):
        """Length of the payload, excluding the 4 bytes header"""
        return len(self.encode_payload())

    def to_bytes(self):
        payload = self.encode_payload()
        if len(payload) > MAX_OPTION_LENGTH:
            raise OptionEncodeError(
                "Payload of option {0} is {1} bytes, more than {2}".format(
                    self.code, len(payload), MAX_OPTION_LENGTH
                )
            )
        try:
            header = OPTION_HEADER.pack(self.code, len(payload))
        except struct.error as e:
            raise OptionEncodeError("Invalid option code {0!r}".format(self.code)) from e
        return header + payload

    def describe(self):
        fields = ", ".join(
            "{0}={1}".format(name, _describe_value(getattr(self, name)))
            for name, field, default in self.schema
        )
        return "{0} -> {1}".format(self.name, fields)

    def __str__(self):
        return self.describe()

    def __eq__(self, other):
        if self.__class__ != other.__class__:
            return False
        return self.code == other.code and self._decoded == other._decoded

    def __getattr__(self, name):
        # __getattr__ is only called when getting an attribute that
        # this object doesn't have.
        if name == "_decoded":
            raise AttributeError(name)
        try:
            return self._decoded[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        raise AttributeError(
            "'{cls}' object property '{prop}' is read-only".format(
                prop=name, cls=self.__class__.__name__
            )
        )

    def __delattr__(self, name):
        self.__setattr__(name, None)

    def __repr__(self):
        args = ["code={0}".format(self.code)]
        for name, field, default in self.schema:
            args.append("{0}={1!r}".format(name, getattr(self, name)))
        return "<{0} {1}>".format(self.__class__.__name__, " ".join(args))


def _describe_value(value):
    if isinstance(value, (bytes, bytearray)):
        return "[{0}]".format(format_payload(value))
    if isinstance(value, list):
        return "[{0}]".format(", ".join(_describe_value(x) for x in value))
    if isinstance(value, Option):
        return "{{{0}}}".format(value.describe())
    return str(value)


class GenericOption(Option):
    """
    Option whose code has no registered decoder. The payload is stored
    verbatim and written back as-is.
    """

    __slots__ = ["code"]
    schema = [("payload", RemainingBytes(), b"")]

    def __init__(self, code, payload=b""):
        if not isinstance(code, int) or not 0 <= code <= 0xFFFF:
            raise ValueError("Invalid option code: {0!r}".format(code))
        object.__setattr__(self, "code", code)
        super(GenericOption, self).__init__(payload=payload)

    def length(self):
        return len(self.payload)

    def describe(self):
        return "{0} -> [{1}]".format(self.name, format_payload(self.payload))


class OptionsField(StructField):
    """
    Field containing a nested list of options, up to the payload end;
    used by the identity association options.
    """

    __slots__ = []

    def load(self, stream, seen=None):
        return decode_options(stream.read())

    def encode(self, options, stream):
        write_bytes(stream, encode_options(options))

    def coerce(self, value):
        options = list(value)
        for option in options:
            if not isinstance(option, Option):
                raise TypeError("expected option, got '{}'".format(option))
        return options


def decode_option(buffer, decoders=None):
    """
    Decode a single option from the start of a buffer.

    Bytes past the end of the first option are left alone; they usually
    belong to the following options.

    :param buffer: a bytes-like object, starting with an option header
    :param decoders: mapping of option codes to decoder callables; defaults
        to the registry of known options
    :returns: a ``(option, consumed)`` tuple, ``consumed`` being the number
        of bytes taken by this option (header included)
    :raises: :py:exc:`~dhcpv6.exceptions.TruncatedHeader`,
        :py:exc:`~dhcpv6.exceptions.TruncatedPayload`,
        :py:exc:`~dhcpv6.exceptions.OptionPayloadError`,
        :py:exc:`~dhcpv6.exceptions.LengthMismatch`
    """
    if decoders is None:
        decoders = KNOWN_OPTIONS

    if len(buffer) < OPTION_HEADER_SIZE:
        raise TruncatedHeader(
            "Invalid DHCPv6 option: {0} bytes, less than {1}".format(
                len(buffer), OPTION_HEADER_SIZE
            ),
            actual=len(buffer),
        )

    code, length = OPTION_HEADER.unpack_from(buffer)
    available = len(buffer) - OPTION_HEADER_SIZE
    if length > available:
        raise TruncatedPayload(
            "Invalid option length for option {0}. Declared {1}, actual {2}".format(
                code, length, available
            ),
            code=code,
            declared=length,
            actual=available,
        )

    payload = bytes(buffer[OPTION_HEADER_SIZE : OPTION_HEADER_SIZE + length])
    decoder = decoders.get(code)
    if decoder is None:
        logger.debug("Unrecognised option code %d, keeping it as raw data", code)
        option = GenericOption(code, payload)
    else:
        try:
            option = decoder(payload)
        except Exception as e:
            # Decoders are pluggable, whatever they raise gets the code attached
            raise OptionPayloadError(
                "Cannot decode option {0} ({1}): {2}".format(code, option_name(code), e),
                code=code,
                declared=length,
            ) from e
        if not isinstance(option, Option):
            raise OptionPayloadError(
                "Decoder for option {0} ({1}) returned {2!r}, not an option".format(
                    code, option_name(code), option
                ),
                code=code,
                declared=length,
            )

    actual = option.length()
    if actual != length:
        raise LengthMismatch(
            "Declared length is different from actual length "
            "for option {0}: {1} != {2}".format(code, length, actual),
            code=code,
            declared=length,
            actual=actual,
        )

    logger.debug("Decoded option %d (%s), %d bytes", code, option.name, length)
    return option, OPTION_HEADER_SIZE + length


def decode_options(buffer, decoders=None):
    """
    Decode a whole options section, until the end of the buffer.

    An empty buffer is valid, and yields no options. Any malformed option
    invalidates the whole section.

    :param buffer: a bytes-like object containing zero or more options
    :param decoders: same as for :py:func:`decode_option`
    :returns: a list of options, in wire order
    """
    options = []
    if len(buffer) == 0:
        # no options, no party
        return options
    if len(buffer) < OPTION_HEADER_SIZE:
        # cannot be shorter than option code (2 bytes) + length (2 bytes)
        raise TruncatedHeader(
            "Invalid options: shorter than {0} bytes".format(OPTION_HEADER_SIZE),
            actual=len(buffer),
        )

    view = memoryview(buffer)
    cursor = 0
    while cursor != len(view):
        if cursor > len(view):
            raise OverrunError(
                "Reading past the end of options: offset {0}, size {1}".format(
                    cursor, len(view)
                ),
                code=options[-1].code,
                declared=cursor,
                actual=len(view),
            )
        option, consumed = decode_option(view[cursor:], decoders)
        options.append(option)
        cursor += OPTION_HEADER_SIZE + option.length()
    return options


def encode_options(options):
    """
    Encode a list of options, in the given order, into a single buffer.
    """
    return b"".join(option.to_bytes() for option in options)
