import pytest

from dhcpv6.options import KNOWN_OPTIONS
from dhcpv6.strictness import Strictness, set_strictness


@pytest.fixture(autouse=True)
def default_strictness():
    set_strictness(Strictness.FORBID)
    yield
    set_strictness(Strictness.FORBID)


@pytest.fixture
def registry():
    """Restore the options registry after a test fiddles with it"""
    saved = dict(KNOWN_OPTIONS)
    yield KNOWN_OPTIONS
    KNOWN_OPTIONS.clear()
    KNOWN_OPTIONS.update(saved)
