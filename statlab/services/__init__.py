# statlab - Services Package
"""Entry points that run descriptive and inferential requests."""
