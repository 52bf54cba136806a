"""XRP Ledger client."""
from .client import DROPS_PER_XRP, XrplClient

__all__ = ["DROPS_PER_XRP", "XrplClient"]
