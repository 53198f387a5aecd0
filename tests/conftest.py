"""Shared fixtures: in-memory table images and default settings."""

from __future__ import annotations

import io

import pytest

from tabledbf.core.config import ReaderSettings
from tabledbf.reader import open_stream
from tests.fakes import minimal_table, multi_field_table


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TABLEDBF_ENCODING", "TABLEDBF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cp866() -> ReaderSettings:
    return ReaderSettings().with_cp866()


@pytest.fixture
def minimal_reader(cp866):
    return open_stream(io.BytesIO(minimal_table()), cp866)


@pytest.fixture
def multi_reader(cp866):
    return open_stream(io.BytesIO(multi_field_table()), cp866)
