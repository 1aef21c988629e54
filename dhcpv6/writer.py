from dhcpv6.options import Option


class OptionWriter(object):
    """
    DHCPv6 options writer.

    :param stream:
        a file-like object to which to write the options.
    """

    __slots__ = ["stream", "written"]

    def __init__(self, stream):
        self.stream = stream
        self.written = 0

    def write_option(self, option):
        """
        Write the given option to this stream.

        :param option:
            a :py:class:`dhcpv6.options.Option` to write.
        :returns: the number of bytes written
        """
        if not isinstance(option, Option):
            raise TypeError("not a DHCPv6 option")
        data = option.to_bytes()
        self.stream.write(data)
        self.written += len(data)
        return len(data)

    def write_options(self, options):
        """Write each of the given options, in order"""
        return sum(self.write_option(option) for option in options)
