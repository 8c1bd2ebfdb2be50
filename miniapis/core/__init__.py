"""
Core utilities shared across the mini-apis backend.

This package hosts:
- configuration helpers (env vars, data paths)
- cross-cutting services such as logging setup and password hashing

Services and routers should depend on core primitives instead of reading
os.environ or configuring logging themselves.
"""
