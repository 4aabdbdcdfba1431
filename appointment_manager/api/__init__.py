"""
HTTP layer shared by every domain: top-level router, middleware and
exception handlers.
"""
