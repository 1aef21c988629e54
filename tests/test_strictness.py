import warnings

import pytest

from dhcpv6 import decode_options
from dhcpv6.duid import DuidEN
from dhcpv6.exceptions import DHCPv6StrictnessError, DHCPv6StrictnessWarning
from dhcpv6.option_types import IANA, IAPD, ClientId, IAAddress, IAPrefix, RequestedOptions
from dhcpv6.strictness import (
    Strictness,
    problem,
    set_strictness,
    should_fix,
    warn,
)

IA_NA_T1_GT_T2 = (
    b"\x00\x03\x00\x0c"
    b"\x00\x00\x00\x01"  # IAID
    b"\x00\x00\x00\x0a"  # T1: 10
    b"\x00\x00\x00\x05"  # T2: 5
)


def test_problem_levels():
    set_strictness(Strictness.FORBID)
    with pytest.raises(DHCPv6StrictnessError, match="oops"):
        problem("oops")

    set_strictness(Strictness.WARN)
    with pytest.warns(DHCPv6StrictnessWarning, match="oops"):
        problem("oops")

    set_strictness(Strictness.NONE)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        problem("oops")
        warn("oops")


def test_warn_never_raises():
    set_strictness(Strictness.FORBID)
    with pytest.warns(DHCPv6StrictnessWarning):
        warn("just saying")


def test_should_fix():
    assert not should_fix()
    set_strictness(Strictness.FIX)
    assert should_fix()


def test_set_strictness_invalid():
    with pytest.raises(TypeError):
        set_strictness(3)


def test_ia_t1_greater_than_t2():
    with pytest.raises(DHCPv6StrictnessError, match="T1"):
        IANA(iaid=1, t1=10, t2=5)
    with pytest.raises(DHCPv6StrictnessError, match="T1"):
        IAPD(iaid=1, t1=10, t2=5)

    # Zero means "left to the client"
    IANA(iaid=1, t1=10, t2=0)

    set_strictness(Strictness.WARN)
    with pytest.warns(DHCPv6StrictnessWarning, match="T1"):
        option = IANA(iaid=1, t1=10, t2=5)
    assert option.to_bytes() == IA_NA_T1_GT_T2


def test_decode_only_warns():
    # Even when forbidding, options read from the wire are kept
    with pytest.warns(DHCPv6StrictnessWarning, match="T1"):
        option, = decode_options(IA_NA_T1_GT_T2)

    assert option.t1 == 10
    assert option.t2 == 5


def test_lifetimes():
    with pytest.raises(DHCPv6StrictnessError, match="lifetime"):
        IAAddress(address="2001:db8::1", preferred_lifetime=20, valid_lifetime=10)
    with pytest.raises(DHCPv6StrictnessError, match="lifetime"):
        IAPrefix(
            preferred_lifetime=20,
            valid_lifetime=10,
            prefix_length=64,
            prefix="2001:db8::",
        )


def test_prefix_length():
    with pytest.raises(DHCPv6StrictnessError, match="prefix length"):
        IAPrefix(prefix_length=129, prefix="2001:db8::")


def test_duid_too_long():
    duid = DuidEN(9, b"x" * 200)
    with pytest.raises(DHCPv6StrictnessError, match="DUID"):
        ClientId(duid=duid)

    data = ClientId.code.to_bytes(2, "big") + (206).to_bytes(2, "big") + duid.pack()
    with pytest.warns(DHCPv6StrictnessWarning, match="DUID"):
        option, = decode_options(data)
    assert option.duid == duid


def test_requested_options_duplicates():
    with pytest.raises(DHCPv6StrictnessError, match="requested twice"):
        RequestedOptions(requested_options=[23, 24, 23])

    set_strictness(Strictness.WARN)
    with pytest.warns(DHCPv6StrictnessWarning):
        option = RequestedOptions(requested_options=[23, 24, 23])
    assert option.requested_options == [23, 24, 23]

    set_strictness(Strictness.FIX)
    with pytest.warns(DHCPv6StrictnessWarning):
        option = RequestedOptions(requested_options=[23, 24, 23])
    assert option.requested_options == [23, 24]
    assert option.to_bytes() == b"\x00\x06\x00\x04\x00\x17\x00\x18"


def test_requested_options_duplicates_decoded_as_is():
    set_strictness(Strictness.FIX)
    data = b"\x00\x06\x00\x06\x00\x17\x00\x18\x00\x17"
    with pytest.warns(DHCPv6StrictnessWarning):
        option, = decode_options(data)

    assert option.requested_options == [23, 24, 23]
    assert option.to_bytes() == data
