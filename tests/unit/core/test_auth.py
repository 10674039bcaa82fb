"""Unit tests for tier-based authorization."""

import pytest
from xnd.core.auth import (
    AuthorizationError,
    can_publish,
    can_set_tiers,
    parse_tier,
    require_publisher,
    require_tier_admin,
)
from xnd.models.config import Session, Tier


@pytest.mark.parametrize(
    ("tier", "expected"),
    [
        (Tier.USER, False),
        (Tier.PACKAGE_MAKER, True),
        (Tier.MODERATOR, True),
        (Tier.CREATOR, True),
    ],
)
def test_can_publish(tier: Tier, expected: bool) -> None:
    """Every tier above user may publish."""
    assert can_publish(Session(username="ana", tier=tier)) is expected


def test_only_creator_sets_tiers() -> None:
    """Only creators may change tiers."""
    assert can_set_tiers(Session(username="ana", tier=Tier.CREATOR))
    assert not can_set_tiers(Session(username="ana", tier=Tier.MODERATOR))
    assert not can_set_tiers(None)


class TestRequirePublisher:
    """Tests for require_publisher."""

    def test_logged_out(self) -> None:
        """Publishing needs a session."""
        with pytest.raises(AuthorizationError, match="logged in"):
            require_publisher(None)

    def test_user_tier(self) -> None:
        """The user tier may not publish."""
        with pytest.raises(AuthorizationError, match="permission"):
            require_publisher(Session(username="ana"))

    def test_package_maker(self) -> None:
        """The session is returned when allowed."""
        session = Session(username="ana", tier=Tier.PACKAGE_MAKER)

        assert require_publisher(session) is session


def test_require_tier_admin_logged_out() -> None:
    """Logged-out users may not set tiers."""
    with pytest.raises(AuthorizationError):
        require_tier_admin(None)


class TestParseTier:
    """Tests for parse_tier."""

    def test_known_tier(self) -> None:
        """Tier names map to the enum."""
        assert parse_tier("package-maker") == Tier.PACKAGE_MAKER

    def test_unknown_tier_lists_valid_ones(self) -> None:
        """The error names every valid tier."""
        with pytest.raises(ValueError, match="user, package-maker, moderator, creator"):
            parse_tier("admin")
