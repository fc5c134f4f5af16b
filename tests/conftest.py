"""Shared test fixtures."""

import pytest

from dotcoerce.extractor import Extractor
from dotcoerce.registry import ConverterRegistry


@pytest.fixture
def registry():
    return ConverterRegistry()


@pytest.fixture
def extractor(registry):
    return Extractor(registry)


@pytest.fixture
def document():
    return {
        "a": {"b": [{"c": 5}, {"c": 7}]},
        "server": {
            "host": "localhost",
            "port": "8080",
            "tls": {"enabled": "yes", "ciphers": ["aes", "chacha"]},
        },
        "matrix": {"rows": [[1, 2], [3, 4]]},
        "flags": ("on", "off"),
        "ratio": "0.75",
        "nothing": None,
    }
