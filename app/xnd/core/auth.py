"""Tier-based authorization checks.

The rules are local only: they look at the session stored in the user
configuration, there is no server-side verification.
"""

from xnd.models.config import Session, Tier

# Tiers allowed to publish packages
PUBLISH_TIERS: frozenset[Tier] = frozenset({Tier.PACKAGE_MAKER, Tier.MODERATOR, Tier.CREATOR})

# Tiers allowed to change other users' tiers
SET_TIER_TIERS: frozenset[Tier] = frozenset({Tier.CREATOR})


class AuthorizationError(Exception):
    """Raised when the current session may not perform an operation."""


def require_login(session: Session | None, action: str) -> Session:
    """Return the session, or raise if logged out.

    Args:
        session: Current session, if any.
        action: Verb phrase for the error message (e.g. "publish packages").

    Raises:
        AuthorizationError: If there is no session.
    """
    if session is None:
        raise AuthorizationError(f"You must be logged in to {action}.")
    return session


def can_publish(session: Session | None) -> bool:
    """Check if a session may publish packages."""
    return session is not None and session.tier in PUBLISH_TIERS


def can_set_tiers(session: Session | None) -> bool:
    """Check if a session may change user tiers."""
    return session is not None and session.tier in SET_TIER_TIERS


def require_publisher(session: Session | None) -> Session:
    """Return the session if it may publish.

    Raises:
        AuthorizationError: If logged out or the tier is too low.
    """
    current = require_login(session, "publish packages")
    if not can_publish(current):
        raise AuthorizationError("You do not have permission to publish packages.")
    return current


def require_tier_admin(session: Session | None) -> Session:
    """Return the session if it may set user tiers.

    Raises:
        AuthorizationError: If logged out or not a creator.
    """
    if session is None or not can_set_tiers(session):
        raise AuthorizationError("You do not have permission to set user tiers.")
    return session


def parse_tier(value: str) -> Tier:
    """Parse a tier name.

    Raises:
        ValueError: If the name is not a known tier.
    """
    try:
        return Tier(value)
    except ValueError:
        valid = ", ".join(t.value for t in Tier)
        msg = f"Invalid tier: {value}. Valid tiers are: {valid}"
        raise ValueError(msg) from None
