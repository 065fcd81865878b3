"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store and the services to decouple the
API representation from the in‑memory collection.
"""
