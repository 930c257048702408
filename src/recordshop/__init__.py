"""
RecordShop
In-memory record album catalogue served over HTTP
"""

__version__ = "0.1.0"
