# ----------------------------------------------------------------------
# Library to decode and encode DHCPv6 options
#
# See: https://www.rfc-editor.org/rfc/rfc8415#section-21
# ----------------------------------------------------------------------

from .options import (  # noqa
    GenericOption,
    Option,
    decode_option,
    decode_options,
    encode_options,
    register_decoder,
    register_option,
    unregister_decoder,
)
from .option_types import *  # noqa
from .scanner import OptionScanner  # noqa
from .writer import OptionWriter  # noqa
