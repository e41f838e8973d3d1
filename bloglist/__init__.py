"""
Blog List Service root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (post authorization, update merging, statistics) and the
MongoDB infrastructure behind it.
"""
