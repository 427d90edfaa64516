"""
WeFund Webhook API - Main application package.

A FastAPI application that receives WooCommerce order webhooks and keeps
the most recent ones in memory.
"""
__version__ = "1.0.0"

__all__ = ["__version__"]
