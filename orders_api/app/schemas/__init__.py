"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the services so the wire format can
change without touching the store.
"""
