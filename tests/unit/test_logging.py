"""Tests for package logger helpers."""

from __future__ import annotations

import io
import logging

import pytest

from tabledbf.core.config import ReaderSettings
from tabledbf.core.logging import get_logger, set_log_level
from tabledbf.reader import open_stream
from tests.fakes import multi_field_table


@pytest.fixture(autouse=True)
def _reset_level():
    yield
    logging.getLogger("tabledbf").setLevel(logging.NOTSET)


def test_package_modules_keep_their_name():
    assert get_logger("tabledbf.reader").name == "tabledbf.reader"


def test_foreign_names_are_nested():
    assert get_logger("myapp").name == "tabledbf.myapp"


def test_set_level_by_name():
    set_log_level("info")
    assert logging.getLogger("tabledbf").level == logging.INFO


def test_set_level_by_number():
    set_log_level(logging.ERROR)
    assert logging.getLogger("tabledbf").level == logging.ERROR


def test_debug_records_emitted_on_open(caplog):
    with caplog.at_level(logging.DEBUG, logger="tabledbf"):
        open_stream(io.BytesIO(multi_field_table()), ReaderSettings())
    assert "language driver id 0x26" in caplog.text
    assert "field 2: BIRTHDATE D(8,0)" in caplog.text
