"""Quotemaster and myPlanner JSON-backed APIs."""

__version__ = "1.0.0"
