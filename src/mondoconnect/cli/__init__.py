"""CLI package for Mondo App Connect.

The main Typer app is created in app.py; importing the command modules
registers their sub-apps on it.
"""

import mondoconnect.cli.commands_apps  # noqa: F401
import mondoconnect.cli.commands_connections  # noqa: F401
from mondoconnect.cli.app import app

__all__ = ["app"]
