"""Infrastructure adapters (MongoDB persistence)."""
