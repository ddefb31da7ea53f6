"""Terminal chess board viewer with clocks and SAN move entry."""

__version__ = "0.1.0"
