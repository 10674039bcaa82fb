"""Account commands: login, logout, whoami and set-tier.

The session lives in the user config file. Nothing is checked against a
server; login records the name with the default tier.
"""

from typing import Annotated

import typer

from xnd.cli.types import require_config
from xnd.core import config as config_io
from xnd.core.auth import AuthorizationError, parse_tier, require_tier_admin
from xnd.core.config import ConfigError
from xnd.models.config import XndConfig
from xnd.utils.formatting import console, print_error, print_info, print_success


def _save(config: XndConfig) -> None:
    """Save the config or exit with an error message."""
    try:
        config_io.save_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def login(
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Username (prompted if omitted)."),
    ] = None,
) -> None:
    """Log in to XND."""
    name = username or typer.prompt("Username")
    # Only asked for; there is no server to check it against
    typer.prompt("Password", hide_input=True)

    if not name.strip():
        print_error("Username cannot be empty.")
        raise typer.Exit(code=1)

    _save(config_io.login(require_config(), name.strip()))
    print_success(f"Logged in as {name.strip()}")


def logout() -> None:
    """Log out of XND."""
    _save(config_io.logout(require_config()))
    print_success("Logged out successfully")


def whoami() -> None:
    """Show the current logged in user."""
    config = require_config()
    if config.user is None:
        print_info("Not logged in")
        return
    console.print(config.user.username, highlight=False)


def set_tier(
    username: Annotated[str, typer.Argument(help="User whose tier to change.")],
    tier: Annotated[str, typer.Argument(help="New tier.")],
) -> None:
    """Set the tier for a user.

    Requires the current session to have the creator tier.
    """
    config = require_config()

    try:
        require_tier_admin(config.user)
        new_tier = parse_tier(tier)
    except (AuthorizationError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info(f"Setting tier for {username} to {new_tier.value}...")
    if config.user is not None and config.user.username == username:
        _save(config_io.login(config, username, new_tier))
    print_success("User tier updated successfully!")
