"""
db/ - Database Layer
====================
The query-execution contract, the PostgreSQL executor, schema bootstrap and
the data-access error types.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
