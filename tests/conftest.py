"""Shared fixtures for vitae tests."""

from pathlib import Path

import pytest

from vitae.contexts.templating import load_resume

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def full_resume():
    return load_resume(FIXTURES_PATH / "full_resume.yaml")


@pytest.fixture
def minimal_resume():
    return load_resume(FIXTURES_PATH / "minimal_resume.yaml")


@pytest.fixture
def no_education_resume():
    return load_resume(FIXTURES_PATH / "no_education.yaml")


@pytest.fixture
def static_dir(tmp_path) -> Path:
    """A small static directory with nested assets."""
    static = tmp_path / "static"
    (static / "css").mkdir(parents=True)
    (static / "js").mkdir()
    (static / "css" / "style.css").write_text("body { color: black; }\n")
    (static / "js" / "main.js").write_text("console.log('hi');\n")
    return static
