"""
utils/ - Shared Helpers
=======================
Logging setup and the Maybe result type used by single-row lookups.
"""
