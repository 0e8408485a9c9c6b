"""Pytest fixtures for pantrymatch tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pantrymatch.catalog import get_default_catalog
from pantrymatch.config import settings as settings_module


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point ~ at a temp dir and drop any cached settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(settings_module, "_settings", None)
    yield home


@pytest.fixture
def catalog():
    """The built-in pasta party catalog."""
    return get_default_catalog()


@pytest.fixture
def pasta_catalog_data() -> dict:
    """The built-in catalog written out as a YAML-ready dict."""
    return {
        "ingredients": ["salt", "butter", "water", "flour", "egg", "cheese", "tomato"],
        "recipes": [
            {"name": "red_pasta", "ingredients": ["pasta", "tomato", "salt"]},
            {
                "name": "cheese_pasta",
                "ingredients": ["pasta", "cheese", "butter"],
                "optional": ["salt"],
            },
            {"name": "butter_pasta", "ingredients": ["butter"]},
            {"name": "pasta", "ingredients": ["flour", "egg", "water"]},
        ],
        "pantry": ["salt", "butter", "water", "flour", "egg", "cheese"],
        "preferences": [
            {"name": "Sally", "prefers": "cheese_pasta"},
            {"name": "Boron", "prefers": "butter_pasta"},
            {"name": "Fati", "prefers": "pasta"},
            {"name": "Chang", "prefers": "red_pasta"},
            {"name": "James", "prefers": "red_pasta"},
            {"name": "Martin", "prefers": "red_pasta"},
        ],
    }


@pytest.fixture
def write_catalog(tmp_path):
    """Write a dict as a YAML catalog file and return its path."""

    def _write(data, name: str = "catalog.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(data, f, sort_keys=False)
        return path

    return _write
