import logging
from collections.abc import Generator

import pytest

from iface import Interface, Param, create


@pytest.fixture()
def number() -> Param:
    return Param(name="n", type="number", support=lambda v: isinstance(v, (int, float)))


@pytest.fixture()
def text() -> Param:
    return Param(name="s", type=str, support=lambda v: isinstance(v, str))


# Diagnostics are only emitted in debug mode, capture them for assertions.
@pytest.fixture()
def debug_interface(caplog: pytest.LogCaptureFixture) -> Generator[Interface, None, None]:
    with caplog.at_level(logging.DEBUG, logger="iface"):
        yield create("Debug", debug=True)
