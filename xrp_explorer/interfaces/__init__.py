"""Protocol interfaces for the wallet explorer."""
from .cache import ResultCache
from .ledger import LedgerClient
from .price_oracle import PriceOracle

__all__ = ["LedgerClient", "PriceOracle", "ResultCache"]
