"""Dialect profiles and the process-wide dialect registry."""

from typing import Dict, List

from ...core.logging import get_logger
from ..errors import DialectError
from .base import STANDARD, DialectProfile, Phase, TypeRenderer
from .mysql import MYSQL
from .postgres import POSTGRESQL
from .sqlite import SQLITE

logger = get_logger(__name__)

# Registry of profiles keyed by lower-case dialect name
_DIALECTS: Dict[str, DialectProfile] = {}

_ALIASES = {
    "postgres": "postgresql",
    "pg": "postgresql",
    "sqlite3": "sqlite",
    "mariadb": "mysql",
}


def register_dialect(profile: DialectProfile, replace: bool = False) -> None:
    """Register a dialect profile under its name.

    Args:
        profile: The profile to register
        replace: Allow replacing an already registered profile

    Raises:
        DialectError: If the name is taken and ``replace`` is False
    """
    key = profile.name.lower()
    if key in _DIALECTS and not replace:
        raise DialectError(f"dialect already registered: {profile.name}")
    _DIALECTS[key] = profile
    logger.debug(f"Registered dialect: {key}")


def get_dialect(name: str) -> DialectProfile:
    """Get the registered profile for a dialect name or alias.

    Raises:
        DialectError: If no such dialect is registered
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    profile = _DIALECTS.get(key)
    if profile is None:
        raise DialectError(f"unsupported dialect: {name}")
    return profile


def available_dialects() -> List[str]:
    """Names of all registered dialects, sorted."""
    return sorted(_DIALECTS)


for _profile in (STANDARD, POSTGRESQL, MYSQL, SQLITE):
    register_dialect(_profile)


__all__ = [
    "DialectProfile",
    "Phase",
    "TypeRenderer",
    "STANDARD",
    "POSTGRESQL",
    "MYSQL",
    "SQLITE",
    "register_dialect",
    "get_dialect",
    "available_dialects",
]
