"""Scaffolding CLI for NetSuite SuiteCloud projects."""

__version__ = "0.3.0"

__all__ = ["__version__"]
