"""
CLI module for pkgexpose.

Provides the command-line interface on top of the library API.
"""
from pkgexpose.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
