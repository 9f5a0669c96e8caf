"""
Unit tests for get_active_object.
"""

import sys
from types import SimpleNamespace

import pytest

from helperkit.exceptions import (
    ComObjectNotFoundError,
    InteropUnavailableError,
    InvalidArgumentError,
)
from helperkit.interop.com import activation, get_active_object


@pytest.fixture
def fake_client(monkeypatch):
    calls = []
    running = {"Excel.Application": object()}

    def get_active(prog_id, dynamic=False):
        calls.append((prog_id, dynamic))
        if prog_id not in running:
            raise OSError(-2147221021, "Operation unavailable")
        return running[prog_id]

    client = SimpleNamespace(GetActiveObject=get_active, calls=calls, running=running)
    monkeypatch.setattr(activation, "_import_comtypes_client", lambda: client)
    return client


class TestGetActiveObject:
    def test_returns_running_instance(self, fake_client):
        instance = get_active_object("Excel.Application")

        assert instance is fake_client.running["Excel.Application"]
        assert fake_client.calls == [("Excel.Application", True)]

    def test_not_running(self, fake_client):
        with pytest.raises(ComObjectNotFoundError) as exc_info:
            get_active_object("Word.Application")

        assert exc_info.value.prog_id == "Word.Application"

    @pytest.mark.parametrize("prog_id", ["", None])
    def test_empty_prog_id(self, fake_client, prog_id):
        with pytest.raises(InvalidArgumentError):
            get_active_object(prog_id)

        assert fake_client.calls == []

    def test_unavailable_off_windows(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")

        with pytest.raises(InteropUnavailableError):
            get_active_object("Excel.Application")


@pytest.mark.windows
@pytest.mark.skipif(sys.platform != "win32", reason="requires a Windows COM runtime")
def test_unregistered_prog_id_on_windows():
    with pytest.raises(ComObjectNotFoundError):
        get_active_object("HelperKit.DoesNotExist")
