"""
Data access layer.  Services wrap the SQLite store and return schema objects.
"""
