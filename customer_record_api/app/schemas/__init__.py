"""
Pydantic schema definitions for API payloads.

Schemas describe the HTTP representation and are kept separate from
the SQL access code in ``services``.
"""
