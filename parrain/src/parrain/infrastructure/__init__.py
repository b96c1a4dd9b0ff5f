"""
Parrain infrastructure layer.
"""
