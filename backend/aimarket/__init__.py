"""
AI Market - storefront and PayPal checkout for AI agent modules.
"""
__version__ = "0.1.0"
