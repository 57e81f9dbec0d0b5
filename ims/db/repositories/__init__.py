"""
Per-domain repository modules for database access.

`records` holds the query helpers every register shares; the domain modules
add the register-specific writes (derived risk levels, reference numbers,
order keys, document links).
"""
