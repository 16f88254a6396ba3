"""
Shared test fixtures and utilities for termsearch tests.

The fixtures model a small contact list: each Searchable has a name, a phone
and an address, and the default tokenizer turns every present field into one
token.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from termsearch.utils.logging_config import SearchLogger


@dataclass(frozen=True)
class Searchable:
    name: str | None = None
    phone: str | None = None
    address: str | None = None

    def __str__(self) -> str:
        return f"{self.name}:{self.phone}:{self.address}"


def tokenize_all(s: Searchable) -> list[str | None]:
    return [s.name, s.phone, s.address]


def tokenize_name(s: Searchable) -> list[str | None]:
    return [s.name]


ONE = Searchable(
    name="John Bob Richards", phone="480-123-2313", address="123 East Johnson Lane"
)
TWO = Searchable(
    name="Joe John Johnson", phone="john@john.com", address="44 E Johns Creek Eight"
)
THREE = Searchable(
    name="Emiliano Kihn",
    phone="+06(4)0703332600",
    address="34101 Kristopher Estates Suite 848 John, TN 09343-4760",
)
FOUR = Searchable(
    name="Richard Noneby",
    phone="Viola17@Bogan.com",
    address="323 Rita Street Suite 521 East Samsonmouth, ND 62494",
)

MAC = Searchable(name="Mac")
MACDONALD_DOUGLAS = Searchable(name="Macdonald Douglas")
BIG_MAC_GRUBER = Searchable(name="Big Mac", address="Gruber")


@pytest.fixture
def searchables() -> list[Searchable]:
    return [ONE, TWO, THREE, FOUR]


@pytest.fixture
def macs() -> list[Searchable]:
    return [BIG_MAC_GRUBER, MACDONALD_DOUGLAS, MAC]


@pytest.fixture
def quiet_logger() -> SearchLogger:
    """A logger that writes nowhere, so tests don't spam stderr."""
    return SearchLogger(name="termsearch.tests", enable_console=False)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: API-related tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "matcher: Matcher-related tests")
    config.addinivalue_line("markers", "scorer: Scorer-related tests")
