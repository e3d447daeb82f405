"""
Marketplace Infrastructure Layer
"""
