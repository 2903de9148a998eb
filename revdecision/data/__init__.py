"""
Revenue record models and tabular row mapping.
"""
