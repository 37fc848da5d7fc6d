"""
API module for the quotebook service.
Provides the FastAPI-based HTTP interface to the quote store and math utilities.
"""

__all__ = ['app', 'routes', 'models', 'middleware']
