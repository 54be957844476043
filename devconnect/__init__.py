"""
DevConnect Backend Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (users, posts, profiles) and the MongoDB infrastructure.
"""
