"""
API layer for the DevConnect backend.

Exposes HTTP endpoints under /api/v1 (users, auth, posts, profile).
"""
