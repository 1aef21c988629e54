#!/usr/bin/env python

"""
Dump the options contained in a DHCPv6 options section.

The section is read either from a binary file, or as a hex string
given on the command line::

    dump_dhcpv6_options.py options.bin
    dump_dhcpv6_options.py --hex 000800020064
"""

import binascii
import logging
import sys

import dhcpv6
from dhcpv6.exceptions import OptionDecodeError

logger = logging.getLogger("dhcpv6")
logger.setLevel(logging.DEBUG)
handler = logging.StreamHandler(sys.stderr)
formatter = logging.Formatter(
    "\033[1;37;40m  %(levelname)s  \033[0m \033[0;32m%(message)s\033[0m"
)
handler.setFormatter(formatter)
logger.addHandler(handler)


def dump_information(scanner):
    for option in scanner:
        print(option)


if __name__ == "__main__":
    try:
        if len(sys.argv) > 2 and sys.argv[1] == "--hex":
            data = binascii.unhexlify(sys.argv[2].replace(":", ""))
            for option in dhcpv6.decode_options(data):
                print(option)

        elif len(sys.argv) > 1:
            with open(sys.argv[1], "rb") as fp:
                dump_information(dhcpv6.OptionScanner(fp))

        else:
            dump_information(dhcpv6.OptionScanner(sys.stdin.buffer))

    except OptionDecodeError as e:
        print("Invalid options section: {0}".format(e), file=sys.stderr)
        sys.exit(1)
