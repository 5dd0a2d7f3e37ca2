"""Mini README: Package initializer for the Spendwise personal-finance service.

Exposes the logging helper and the ledger engine so callers can build an
engine instance and hand it to the interface layer without knowing the
module structure underneath.
"""

from .finance import LedgerEngine
from .logging_utils import get_logger

__all__ = ["LedgerEngine", "get_logger"]
