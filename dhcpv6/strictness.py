"""
Module for alerting the user about DHCPv6 options that are well-framed on
the wire but carry questionable values (T1 past T2, lifetimes out of order,
duplicated requested codes and the like).

Options built from keyword arguments go through :py:func:`problem`, which
honours the configured level. Options decoded from the wire only go through
:py:func:`warn`: a peer sending odd values must not break decoding, and
what was read is never altered.
"""

import warnings
from enum import Enum

from dhcpv6.exceptions import DHCPv6StrictnessError, DHCPv6StrictnessWarning


class Strictness(Enum):
    NONE = 0  # Build whatever is asked, silently
    WARN = 1  # Build it, but warn about questionable values
    FIX = 2  # Warn, and let the option fix its values where it knows how
    FORBID = 3  # Refuse to build options with questionable values


strict_level = Strictness.FORBID


def set_strictness(level):
    """Change the process-wide level; expects a :py:class:`Strictness`"""
    if type(level) is not Strictness:
        raise TypeError("expected a Strictness level, got {0!r}".format(level))
    global strict_level
    strict_level = level


def problem(msg):
    "Report a questionable value in an option being built."
    if strict_level == Strictness.FORBID:
        raise DHCPv6StrictnessError(msg)
    elif strict_level in (Strictness.WARN, Strictness.FIX):
        warnings.warn(DHCPv6StrictnessWarning(msg))


def warn(msg):
    "Report a questionable value in an option read from the wire."
    if strict_level.value > Strictness.NONE.value:
        warnings.warn(DHCPv6StrictnessWarning(msg))


def should_fix():
    "Whether ``Option._fix()`` hooks run on options being built."
    return strict_level == Strictness.FIX
