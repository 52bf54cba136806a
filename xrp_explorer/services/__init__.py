"""Service modules"""
from .explorer import WalletExplorer, compute_fiat_value

__all__ = ["WalletExplorer", "compute_fiat_value"]
