"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories bind domain fields to statement parameters, hand the statement
to the injected QueryExecutor, and map result rows back into domain objects.
"""
