"""
Core utilities shared across the Aree Verdi API.

This package hosts configuration helpers (env vars, file paths) and
cross-cutting concerns such as logging setup and request logging middleware.
Routers and services depend on these primitives instead of reading
os.environ directly.
"""
