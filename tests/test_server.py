"""Tests for the HTTP front door."""

import pytest

from wizbridge import server
from wizbridge.bulb import BulbSimulator
from wizbridge.config import BridgeConfig
from wizbridge.network import BulbAddress, BulbNetworkError
from wizbridge.server import create_app


def test_toggle_path_returns_close_page(simulator, make_client):
    sim = simulator(reply=b'{"result":{"state":true}}')
    client = make_client(sim)

    resp = client.get("/bulb")

    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    body = resp.get_data(as_text=True)
    assert "<script>window.close();</script>" in body
    assert 'href="data:image/png;base64,' in body
    assert sim.wait_for(2)
    assert sim.received[1] == {"method": "setState", "params": {"state": False}}


def test_any_prefix_ending_in_suffix_toggles(simulator, make_client):
    sim = simulator(is_on=False)
    client = make_client(sim)

    resp = client.post("/lights/living-room/bulb")

    assert resp.status_code == 200
    assert sim.wait_for(2)
    assert sim.bulb.is_on is True


def test_successive_requests_alternate_state(simulator, make_client):
    sim = simulator(is_on=True)
    client = make_client(sim)

    states = []
    for i in range(3):
        assert client.get("/bulb").status_code == 200
        assert sim.wait_for(2 * (i + 1))
        states.append(sim.bulb.is_on)

    assert states == [False, True, False]


@pytest.mark.parametrize("method,path", [
    ("GET", "/"),
    ("GET", "/favicon.ico"),
    ("GET", "/bulbs"),
    ("GET", "/bulb/"),
    ("GET", "/bulb/extra"),
    ("GET", "//foo"),
    ("GET", "/lights//kitchen"),
    ("POST", "/foo"),
    ("PUT", "/foo"),
    ("DELETE", "/"),
    ("PATCH", "/favicon.ico"),
    ("PUT", "/bulb"),
    ("DELETE", "/bulb"),
    ("HEAD", "/bulb"),
    ("OPTIONS", "/bulb"),
])
def test_other_paths_404_without_udp_traffic(simulator, make_client, monkeypatch, method, path):
    sim = simulator()
    client = make_client(sim)

    def fail(*args, **kwargs):
        raise AssertionError("toggle_bulb must not run for %s %s" % (method, path))

    monkeypatch.setattr(server, "toggle_bulb", fail)
    resp = client.open("/", method=method, environ_overrides={"PATH_INFO": path})

    assert resp.status_code == 404
    assert resp.get_data() == b""
    assert not sim.wait_for(1, timeout=0.2)


def test_timeout_returns_504_not_close_page(simulator, make_client):
    sim = simulator(silent=True)
    client = make_client(sim, timeout=0.2)

    resp = client.get("/bulb")

    assert resp.status_code == 504
    assert resp.get_json()["error"] == "bulb_timeout"
    assert "window.close" not in resp.get_data(as_text=True)
    assert sim.wait_for(1)
    assert sim.received == [{"method": "getPilot"}]


def test_bad_reply_returns_502(simulator, make_client):
    sim = simulator(reply=b'{"result":{}}')
    client = make_client(sim)

    resp = client.get("/bulb")

    assert resp.status_code == 502
    assert resp.get_json()["error"] == "bulb_protocol_error"
    assert not sim.wait_for(2, timeout=0.3)


def test_network_error_returns_502(monkeypatch):
    def unreachable(address, timeout):
        raise BulbNetworkError(f"setState to {address} failed: [Errno 101] Network is unreachable")

    monkeypatch.setattr(server, "toggle_bulb", unreachable)
    app = create_app(BridgeConfig(address=BulbAddress("192.0.2.10")))
    resp = app.test_client().get("/bulb")

    assert resp.status_code == 502
    body = resp.get_json()
    assert body["error"] == "bulb_unreachable"
    assert "Network is unreachable" in body["message"]


def test_failure_is_logged(simulator, make_client, caplog):
    sim = simulator(reply=b"not json")
    client = make_client(sim)

    with caplog.at_level("ERROR", logger="wizbridge.server"):
        client.get("/bulb")

    assert "There was an error setting bulb" in caplog.text


def test_custom_path_suffix(simulator):
    sim = simulator(is_on=False)
    app = create_app(BridgeConfig(address=sim.address, timeout=0.3, path_suffix="/toggle"))
    client = app.test_client()

    assert client.get("/bulb").status_code == 404
    assert client.get("/toggle").status_code == 200


def test_config_is_per_app():
    with BulbSimulator() as first, BulbSimulator() as second:
        create_app(BridgeConfig(address=first.address, timeout=0.3)).test_client().get("/bulb")
        create_app(BridgeConfig(address=second.address, timeout=0.3)).test_client().get("/bulb")

        assert first.wait_for(2) and second.wait_for(2)
        assert first.bulb.is_on is True
        assert second.bulb.is_on is True
