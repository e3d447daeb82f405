"""
Marketplace Application Layer

Use cases and ports for orders, products and users.
"""
