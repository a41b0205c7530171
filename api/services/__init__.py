"""
API Services - Long-lived state shared by the paxsheets API routers.
"""

from .resolver_cache import ResolverCache

__all__ = [
    "ResolverCache",
]
