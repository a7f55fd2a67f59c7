"""
Endpoint modules.  Each module defines an ``APIRouter`` for one resource.
"""
