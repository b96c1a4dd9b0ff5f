"""
Parrain presentation layer.
"""
