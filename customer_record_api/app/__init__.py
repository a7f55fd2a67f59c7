"""
Application package for the Customer Record API.

The service is split into ``core`` (configuration, logging, storage,
validation and errors), ``schemas`` (pydantic request and response
models), ``services`` (SQL access) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
