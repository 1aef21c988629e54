"""Generic constants"""

from dhcpv6.constants.option_codes import OPTION_NAMES, UNKNOWN_OPTION_NAME
from dhcpv6.constants.status_codes import STATUS_CODE_NAMES, UNKNOWN_STATUS_NAME

# Option header: 16bit code, 16bit payload length, network byte order
OPTION_HEADER_SIZE = 4

# Largest payload the 16bit length field can describe
MAX_OPTION_LENGTH = 0xFFFF


def option_name(code):
    """Symbolic name of an option code, ``UnknownOption`` if not known"""
    return OPTION_NAMES.get(code, UNKNOWN_OPTION_NAME)


def status_code_name(code):
    return STATUS_CODE_NAMES.get(code, UNKNOWN_STATUS_NAME)
