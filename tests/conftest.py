"""Shared test fixtures for yamltags."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from yamltags.engine.fields import tagged
from yamltags.parser.loader import TrackedLoader
from yamltags.settings import Settings
from yamltags.validators.registry import ValidatorRegistry


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def loader(settings: Settings) -> TrackedLoader:
    return TrackedLoader(settings)


@pytest.fixture
def registry() -> ValidatorRegistry:
    """A fresh registry with only the built-in validators."""
    return ValidatorRegistry.with_defaults()


@dataclass
class Person:
    name: str = tagged(yaml="name", validate="required", default="")
    age: int = tagged(yaml="age", validate="gt=18", default=0)
    created_at: str = tagged(
        yaml="created_at", validate="datetime=2006-01-02T15:04:05Z07:00", default=""
    )
    email: str = tagged(yaml="email", validate="email", default="")


PERSON_YAML = """\
name: John Doe
age: 30
email: john.doe@example.com
created_at: "2023-06-21T15:00:00Z"
"""

UNDERAGE_YAML = """\
age: 16
email: john.doe@example.com
created_at: 2023-06-21T15:00:00Z
"""
