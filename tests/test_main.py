from flask import Flask

from wizbridge import main as main_module


def test_missing_bulb_ip_exits_before_serving(monkeypatch, caplog):
    monkeypatch.delenv("WIZ_BULB_IP", raising=False)

    def run(*args, **kwargs):
        raise AssertionError("server must not start without a bulb address")

    monkeypatch.setattr(Flask, "run", run)

    assert main_module.main([]) == 2
    assert "WIZ_BULB_IP" in caplog.text


def test_serves_sequentially_with_cli_overrides(monkeypatch):
    monkeypatch.setenv("WIZ_BULB_IP", "192.168.1.20")
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))

    assert main_module.main(["--port", "8080", "--host", "127.0.0.1"]) == 0
    assert calls == [{"host": "127.0.0.1", "port": 8080, "threaded": False}]


def test_parser_defaults_are_unset():
    args = main_module.build_parser().parse_args([])
    assert all(value is None for value in vars(args).values())
