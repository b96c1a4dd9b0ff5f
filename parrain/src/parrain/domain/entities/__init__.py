"""
Domain entities package.
"""
