"""
RecordShop API Routes
"""

from . import albums

__all__ = ["albums"]
