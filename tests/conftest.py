from __future__ import annotations

from pathlib import Path

import pytest

from barista.codegen import GeneratorConfig, NamingConfig

CAR_SOURCE = """\
package com.example.garage;

import java.util.List;

/**
 * A car, with a private int ignored; in this comment.
 */
public class Car {
    private static final long serialVersionUID = 1L;
    private static int instances = 0;
    private transient Object cache;
    private final String vin = "unknown";

    private String m_make;
    private int m_year;
    private boolean isElectric;
    private String color;

    public Car() {
        instances++;
    }

    public String describe() {
        String local = m_make + " " + m_year;
        return local;
    }
}
"""


@pytest.fixture
def car_source() -> str:
    """Java source of a class with prefixed, plain and excluded fields."""
    return CAR_SOURCE


@pytest.fixture
def car_file(tmp_path: Path) -> Path:
    """The Car class written to a .java file."""
    path = tmp_path / "Car.java"
    path.write_text(CAR_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def all_enabled() -> GeneratorConfig:
    """Configuration with every emitter switched on."""
    return GeneratorConfig(
        generate_getters=True,
        generate_setters=True,
        generate_copy_constructor=True,
        generate_equals_hash=True,
    )


@pytest.fixture
def prefixed_naming() -> NamingConfig:
    return NamingConfig(var_prefix="m_")
