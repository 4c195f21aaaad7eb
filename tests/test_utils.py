"""Tests for source loading and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from barista.logging_config import configure_logging, get_logger
from barista.utils import JavaSourceError, load_java_source


def test_load_java_source(car_file: Path, car_source: str) -> None:
    assert load_java_source(car_file) == car_source


def test_load_accepts_other_extensions(tmp_path: Path) -> None:
    path = tmp_path / "Car.txt"
    path.write_text("class Car {}", encoding="utf-8")
    assert load_java_source(str(path)) == "class Car {}"


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_java_source(tmp_path / "Missing.java")


def test_load_directory(tmp_path: Path) -> None:
    with pytest.raises(JavaSourceError, match="Not a regular file"):
        load_java_source(tmp_path)


def test_load_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "Binary.java"
    path.write_bytes(b"\xff\xfe\x00class")
    with pytest.raises(JavaSourceError, match="not valid UTF-8"):
        load_java_source(path)


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "barista"
    assert get_logger("barista.cli").name == "barista.cli"
    assert get_logger("extras").name == "barista.extras"


def test_configure_logging_levels(tmp_path: Path) -> None:
    logger = configure_logging()
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING

    log_file = tmp_path / "debug.log"
    logger = configure_logging(verbose=True, log_file=log_file)
    assert len(logger.handlers) == 2
    assert all(handler.level == logging.DEBUG for handler in logger.handlers)

    get_logger("tests").debug("written to file")
    assert "written to file" in log_file.read_text(encoding="utf-8")

    configure_logging()
