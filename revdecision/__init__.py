"""
Revdecision - Business Revenue Decision Engine

Turns time-stamped revenue records into yearly aggregates, growth trends,
investment projections, installment plan amortization, a risk rating and a
buy-versus-sell recommendation for a small business owner.
"""

__version__ = "0.1.0"
__author__ = "Revdecision Team"
