"""
High-level use cases for the mini-apis backend.

Each service owns one JSON document store and implements the business rules
of one API (quotemaster, myPlanner).

Routers (FastAPI endpoints) should call these services instead of manipulating
the JSON documents directly.
"""
