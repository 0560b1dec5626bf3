"""Shared pytest fixtures for lambda_calculus tests."""

import pytest

from lambda_calculus import utils


@pytest.fixture(autouse=True)
def no_debug():
  utils.set_debug(False)
  yield
  utils.set_debug(False)
