"""
API routers for AI Market.
"""
