"""Adapters to external collaborators."""

from weapon_search.adapters.weapon_api import WeaponLookup, WeaponSearchClient


__all__ = ["WeaponLookup", "WeaponSearchClient"]
