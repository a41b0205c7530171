"""
API Routers - Organized endpoint handlers for the paxsheets API.

Each router handles a specific domain:
- pax: Resolve PAX names from comments, roster cleanup, alias overrides
"""
