"""Exception hierarchy for the weapon search client."""


class WeaponSearchError(Exception):
    """Base error for the weapon search client."""


class WeaponLookupError(WeaponSearchError):
    """Raised when the lookup service cannot be reached or returns an unusable payload."""
