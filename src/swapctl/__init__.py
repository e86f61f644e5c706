"""swapctl: coin swap quoting with live amount normalization."""

__version__ = "0.1.0"
