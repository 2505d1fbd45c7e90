"""
models/ - Domain Models
=======================
Plain dataclasses for companies and jobs, plus the table of fields each
entity allows a partial update to change.
"""
