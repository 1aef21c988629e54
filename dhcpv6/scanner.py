from dhcpv6.constants import OPTION_HEADER_SIZE
from dhcpv6.exceptions import StreamEmpty, TruncatedHeader
from dhcpv6.options import OPTION_HEADER, decode_option


class OptionScanner(object):
    """
    DHCPv6 options scanner.

    This object can be iterated to get options out of a stream
    (a file or file-like object providing a .read() method) holding
    an options section, one option at a time.

    Example usage:

        .. code-block:: python

            from dhcpv6 import OptionScanner

            with open('/tmp/options.bin', 'rb') as fp:
                scanner = OptionScanner(fp)
                for option in scanner:
                    pass  # do something with the option...

    :param stream:
        a file-like object from which to read the data.
        If you need to parse data you have entirely in-memory, just use
        :py:func:`dhcpv6.decode_options`.
    :param decoders:
        mapping of option codes to decoders, defaults to the registry
        of known options.
    """

    __slots__ = ["stream", "decoders", "offset"]

    def __init__(self, stream, decoders=None):
        self.stream = stream
        self.decoders = decoders
        self.offset = 0

    def __iter__(self):
        while True:
            try:
                yield self._read_next_option()
            except StreamEmpty:
                return

    def _read_next_option(self):
        header = self.stream.read(OPTION_HEADER_SIZE)
        if len(header) == 0:
            raise StreamEmpty("End of options reached")
        if len(header) < OPTION_HEADER_SIZE:
            raise TruncatedHeader(
                "Invalid DHCPv6 option at offset {0}: {1} bytes, less than {2}".format(
                    self.offset, len(header), OPTION_HEADER_SIZE
                ),
                actual=len(header),
            )

        length = OPTION_HEADER.unpack(header)[1]
        payload = self.stream.read(length)
        # A short read is reported by decode_option as a truncated payload
        option, consumed = decode_option(header + payload, self.decoders)
        self.offset += consumed
        return option
