"""
API package: routers, endpoint modules and request dependencies.
"""
