"""
End-to-end pipeline: fetch every group, update the ledger, report an exit code.
"""

from .runner import main, run_pipeline  # noqa: F401

__all__ = ["main", "run_pipeline"]
