"""
utils/ - Shared Helpers
=======================
Logging setup, the error taxonomy and the partial-update SQL builder.
"""
