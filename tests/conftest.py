"""Shared pytest fixtures for the toylang test suite."""

from __future__ import annotations

import pytest

FACTORIAL = """\
function factorial(n) {
  var result = 1;
  while (n != 1) {
    result = result * n;
    n = n - 1;
  }
  return result;
}
"""


@pytest.fixture
def factorial_source():
    return FACTORIAL
