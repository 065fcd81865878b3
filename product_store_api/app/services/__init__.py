"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  They operate on
the ``ProductStore`` they are given, so the in‑memory collection could
be swapped for a database without changing the API handlers.
"""
