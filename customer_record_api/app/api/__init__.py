"""
HTTP routes.

``router`` in ``api.router`` aggregates the per-resource routers found
in ``api.endpoints`` and is mounted at the application root.
"""
