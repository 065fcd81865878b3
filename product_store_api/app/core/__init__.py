"""
Core infrastructure: settings, logging, error kinds, API‑key
authentication and the in‑memory product store.
"""
