"""
Tests del entry point de matching: códigos de salida.
"""

import sys

import pytest

from inmomatch.exceptions import ConfigurationError, RecordNotFoundError
from inmomatch.scripts import run_matching as script


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(script, "configure_logging", lambda level: None)


def _run_main(monkeypatch, fake_run, *argv) -> int:
    monkeypatch.setattr(script, "run_matching", fake_run)
    monkeypatch.setattr(sys, "argv", ["run_matching", *argv])

    with pytest.raises(SystemExit) as exc_info:
        script.main()
    return exc_info.value.code


def test_success_exits_zero(monkeypatch):
    calls = []

    async def fake_run(**kwargs):
        calls.append(kwargs)

    code = _run_main(monkeypatch, fake_run, "--user-id", "u1", "--min-percentage", "60")

    assert code == 0
    assert calls == [
        {"min_percentage": 60, "user_id": "u1", "listing_id": None, "stats": False}
    ]


def test_missing_record_exits_one(monkeypatch):
    async def fake_run(**kwargs):
        raise RecordNotFoundError("Usuario", "missing")

    assert _run_main(monkeypatch, fake_run, "--user-id", "missing") == 1


def test_configuration_error_exits_one(monkeypatch):
    async def fake_run(**kwargs):
        raise ConfigurationError("SUPABASE_URL y SUPABASE_KEY son requeridos")

    assert _run_main(monkeypatch, fake_run) == 1


def test_unexpected_error_exits_one(monkeypatch):
    async def fake_run(**kwargs):
        raise RuntimeError("boom")

    assert _run_main(monkeypatch, fake_run, "--stats") == 1


def test_interrupt_exits_130(monkeypatch):
    def fake_run(**kwargs):
        raise KeyboardInterrupt

    assert _run_main(monkeypatch, fake_run) == 130
