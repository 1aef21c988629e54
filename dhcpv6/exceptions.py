from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure reported by :py:exc:`OptionDecodeError`"""

    TRUNCATED_HEADER = "truncated_header"
    TRUNCATED_PAYLOAD = "truncated_payload"
    LENGTH_MISMATCH = "length_mismatch"
    OVERRUN = "overrun"
    PAYLOAD = "payload"


class DHCPv6Exception(Exception):
    """Base for all the dhcpv6 exceptions"""

    pass


class DHCPv6Warning(Warning):
    """Base for all the dhcpv6 warnings"""

    pass


class DHCPv6StrictnessError(DHCPv6Exception):
    """Indicate a condition about poorly formed DHCPv6 options"""


class DHCPv6StrictnessWarning(DHCPv6Warning):
    """Indicate a condition about poorly formed DHCPv6 options"""


class OptionDecodeError(DHCPv6Exception):
    """
    Base for errors found while decoding an options section.

    Every instance carries the failure ``kind`` plus whatever structured
    context applies: the option ``code``, the ``declared`` length (from
    the option header) and the ``actual`` length found. Fields that do not
    apply are ``None``.
    """

    kind = None

    def __init__(self, message, code=None, declared=None, actual=None):
        super(OptionDecodeError, self).__init__(message)
        self.code = code
        self.declared = declared
        self.actual = actual


class TruncatedHeader(OptionDecodeError):
    """Fewer than 4 bytes were available where an option header starts"""

    kind = ErrorKind.TRUNCATED_HEADER


class TruncatedPayload(OptionDecodeError):
    """The declared option length exceeds the bytes actually available"""

    kind = ErrorKind.TRUNCATED_PAYLOAD


class LengthMismatch(OptionDecodeError):
    """
    The decoded option reports a length different from the one declared
    in its header, meaning the per-type decoder consumed the wrong amount
    of data.
    """

    kind = ErrorKind.LENGTH_MISMATCH


class OverrunError(OptionDecodeError):
    """The decoding cursor moved past the end of the options buffer"""

    kind = ErrorKind.OVERRUN


class OptionPayloadError(OptionDecodeError):
    """
    The type-specific decoder for an option failed; the original
    exception is chained as ``__cause__``.
    """

    kind = ErrorKind.PAYLOAD


class FieldError(DHCPv6Exception):
    """Base for errors raised while reading fields out of a payload"""

    pass


class StreamEmpty(FieldError):  # End of payload
    """
    Exception indicating that the end of the payload was reached
    and exactly zero bytes were read; list fields use it to detect
    that no further items are available.
    """

    pass


class TruncatedField(FieldError):
    """
    Exception used to indicate that not all the required bytes
    could be read before the payload end, but the read length was
    non-zero.
    """

    pass


class MalformedField(FieldError):
    """The bytes are all there, but cannot be decoded as the field type"""

    pass


class OptionEncodeError(DHCPv6Exception):
    """Indicate an error while serializing an option"""

    pass
