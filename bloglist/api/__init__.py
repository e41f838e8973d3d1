"""
API layer for the Blog List service.

Exposes HTTP endpoints under /api (users, blogs, stats).
"""
