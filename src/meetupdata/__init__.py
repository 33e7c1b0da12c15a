"""
meetupdata: event listings for the Mauritius tech community groups.

Subpackages
-----------
- data:        fetching, persisting and the metadata ledger
- pipeline:    the end-to-end run and its exit code
- plugins:     CLI commands
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("mauritius-meetups-data")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0-dev"

__all__ = [
    "data",
]

from . import data  # noqa: E402
