"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


# Complete test environment that overrides every config value
TEST_ENV = {
    "WEAPON_API_URL": "https://weapons.test/api",
    "HTTP_TIMEOUT": "5",
    "SEARCH_DEBOUNCE_MS": "300",
    "MIN_QUERY_LENGTH": "2",
    "MAX_SUGGESTIONS": "10",
    "STAT_MAX_VALUE": "100",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
    # Proxy settings - ensure they're cleared for tests
    "http_proxy": "",
    "https_proxy": "",
    "all_proxy": "",
    "no_proxy": "",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value

from tests.fixtures.weapons import make_perk, make_weapon


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment variables to the test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def exotic_weapon():
    return make_weapon(
        hash=1345867570,
        name="Sweet Business",
        rarity="Exotic",
        element="Kinetic",
        icon="/icons/sweet_business.jpg",
        perk_groups=[
            {
                "category": "WEAPON COSMETICS",
                "perks": [
                    make_perk("Default Ornament", icon="/icons/default.jpg", plug="ornaments"),
                    make_perk("Her Enterprise", icon="/icons/her_enterprise.jpg", plug="ornaments"),
                    make_perk("Bank Transfer", icon="/icons/bank_transfer.jpg", plug="ornaments"),
                    make_perk("Default Shader", icon="/icons/shader.jpg", plug="shader"),
                ],
            },
            {
                "category": "WEAPON PERKS",
                "perks": [
                    make_perk("Payday", plug="intrinsics"),
                    make_perk("Corkscrew Rifling", plug="barrels"),
                    make_perk("Tracking Module", plug="v400.plugs.weapons.masterworks.trackers"),
                ],
            },
        ],
    )


@pytest.fixture
def legendary_weapon():
    return make_weapon(
        hash=2171478765,
        name="Fatebringer",
        rarity="Legendary",
        element="Kinetic",
        icon="/icons/fatebringer.jpg",
    )
