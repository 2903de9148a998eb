"""
Value objects produced by the calculation core.
"""
