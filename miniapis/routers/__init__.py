"""
FastAPI routers grouped by API (quotemaster, ...).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py).
"""
