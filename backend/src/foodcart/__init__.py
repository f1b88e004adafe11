"""Foodcart: catalog and favorites REST service."""

__version__ = "0.1.0"
