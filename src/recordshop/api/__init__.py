"""
RecordShop API Module
HTTP routes and request dependencies
"""
