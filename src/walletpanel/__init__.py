"""WalletPanel - wallet connection status panel over a MetaMask-style bridge."""

__version__ = "1.0.0"
