"""
Parrain domain layer.
"""
