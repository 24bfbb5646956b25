"""
Server-side cache priming for client-side fetches.
"""

__version__ = "1.0.0"
