import pytest

from wizbridge.bulb import BulbSimulator, SmartBulb
from wizbridge.config import BridgeConfig
from wizbridge.server import create_app

FAST_TIMEOUT = 0.3


@pytest.fixture
def simulator():
    """Factory for running bulb simulators; all are stopped at teardown."""
    started = []

    def _make(is_on=False, **kwargs):
        sim = BulbSimulator(SmartBulb(is_on=is_on), **kwargs).start()
        started.append(sim)
        return sim

    yield _make
    for sim in started:
        sim.stop()


@pytest.fixture
def make_client():
    def _make(sim, timeout=FAST_TIMEOUT):
        config = BridgeConfig(address=sim.address, timeout=timeout)
        app = create_app(config)
        app.config["TESTING"] = True
        return app.test_client()

    return _make
