"""Flow measures, filters, events and flight information regions for ECFMP data."""

__version__ = "0.1.0"