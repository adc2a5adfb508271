from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests

from enum_generator import utils
from enum_generator.utils import (
    DescriptorLoadError,
    load_descriptor,
    save_descriptor,
)


class _FakeResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        return self._payload


def test_load_from_file(write_descriptor, status_descriptor) -> None:
    path = write_descriptor(status_descriptor)
    source, data = load_descriptor(file_path=path)
    assert source == str(path)
    assert data["name"] == "Status"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_descriptor(file_path=tmp_path / "missing.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{")
    with pytest.raises(DescriptorLoadError, match="Invalid JSON"):
        load_descriptor(file_path=path)


def test_descriptor_needs_name(write_descriptor) -> None:
    path = write_descriptor({"fields": []})
    with pytest.raises(DescriptorLoadError, match="name"):
        load_descriptor(file_path=path)


def test_descriptor_must_be_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]")
    with pytest.raises(DescriptorLoadError, match="JSON object"):
        load_descriptor(file_path=path)


def test_source_arguments_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(DescriptorLoadError):
        load_descriptor()
    with pytest.raises(DescriptorLoadError):
        load_descriptor(file_path=tmp_path / "a.json", url="http://example.com/a.json")


def test_load_from_url(monkeypatch, status_descriptor) -> None:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse(status_descriptor)

    monkeypatch.setattr(utils.requests, "get", fake_get)
    source, data = load_descriptor(url="https://example.com/status.json", timeout=5)
    assert source == "https://example.com/status.json"
    assert data == status_descriptor
    assert calls == [("https://example.com/status.json", 5)]


def test_url_http_error(monkeypatch) -> None:
    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: _FakeResponse({}, 404))
    with pytest.raises(DescriptorLoadError, match="HTTP error 404"):
        load_descriptor(url="https://example.com/missing.json")


def test_url_timeout(monkeypatch) -> None:
    def fake_get(url, timeout):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(utils.requests, "get", fake_get)
    with pytest.raises(DescriptorLoadError, match="timeout"):
        load_descriptor(url="https://example.com/slow.json")


def test_invalid_url() -> None:
    with pytest.raises(DescriptorLoadError, match="Invalid URL"):
        load_descriptor(url="not-a-url")


def test_save_descriptor(tmp_path: Path, status_descriptor) -> None:
    path = tmp_path / "out.json"
    save_descriptor(status_descriptor, path)
    assert json.loads(path.read_text(encoding="utf-8")) == status_descriptor
