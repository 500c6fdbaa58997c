# statlab - API Package
"""Request/response schemas for the engine boundary."""
