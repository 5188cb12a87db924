"""Unit tests for loguru setup and request tagging."""

import re

import pytest
from loguru import logger

from vitae import __version__
from vitae.contexts.delivery.logger import _log_info, request_context
from vitae.utils.logger import collect_provenance, setup_logger


@pytest.fixture
def log_file(tmp_path):
    path = setup_logger("deliver", tmp_path / "logs" / "serve_test", extra_provenance={"Port": 8081})
    yield path
    logger.remove()


@pytest.mark.unit
def test_log_file_in_session_dir(log_file, tmp_path):
    assert log_file == tmp_path / "logs" / "serve_test" / "deliver.log"
    assert log_file.exists()


@pytest.mark.unit
def test_provenance_header(log_file):
    """Test the header records the process, the version and the extra entries."""
    text = log_file.read_text()

    assert f"vitae: {__version__}" in text
    assert "Context: deliver" in text
    assert "Port: 8081" in text
    assert f"Log file: {log_file}" in text


@pytest.mark.unit
def test_records_tagged_with_request_id(log_file):
    """Test records inside a request carry its id and others carry a dash."""
    with request_context("ab12cd34"):
        _log_info("inside request")
    _log_info("outside request")

    lines = log_file.read_text().splitlines()
    inside = next(line for line in lines if "inside request" in line)
    outside = next(line for line in lines if "outside request" in line)

    assert re.search(r"\| ab12cd34 \| \[deliver\] inside request$", inside)
    assert re.search(r"\| -\s+\| \[deliver\] outside request$", outside)


@pytest.mark.unit
def test_collect_provenance():
    provenance = collect_provenance()

    assert provenance["vitae"] == __version__
    assert set(provenance) == {"Command", "Working directory", "Python", "vitae"}
