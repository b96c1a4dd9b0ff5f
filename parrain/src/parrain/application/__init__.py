"""
Parrain application layer.
"""
