"""Fixtures shared across all pdfsampler tests."""

import logging

import pytest


def quiet_numba():
	"""Remove noise in the logs irrelevant to testing."""
	# numba logs every compilation step at DEBUG level
	logging.getLogger("numba").setLevel(logging.WARNING)


@pytest.fixture(autouse=True, scope="session")
def _quiet_logs():
	quiet_numba()
	yield
