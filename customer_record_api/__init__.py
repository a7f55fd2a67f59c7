"""
Top-level package for the Customer Record API.

All functionality lives in the ``app`` subpackage; the ASGI
application is available as ``customer_record_api.app.main:app``.
"""

__all__ = []
