"""
Utility functions module.

Time Semantics:
- Record timestamps are stored as timezone-aware UTC datetimes
- Naive datetimes coming from spreadsheets are interpreted as UTC
- The calculation core never reads the wall clock
"""
