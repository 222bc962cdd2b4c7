"""Command line interface.

``create_app`` builds the Typer application with help texts in the active
language; ``main`` is the console script entry point.
"""

from typeorm_extender.cli.app import create_app, main

__all__ = ["create_app", "main"]
