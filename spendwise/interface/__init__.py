"""Mini README: HTTP interface for Spendwise.

Exports the FastAPI application factory serving the ledger engine as a JSON
API. Future interface modules should live alongside this module.
"""

from .web_app import create_application

__all__ = ["create_application"]
