"""
Service layer.

Services hold the in-memory state the API operates on.  They know
nothing about HTTP; lifetimes are decided by ``core.lifecycle``.
"""
