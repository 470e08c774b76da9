"""
MiniLink
A minimal professional network backend.

Architecture:
- MongoDB: users, connection requests, job postings
- JWT: stateless bearer tokens carrying the user id
- FastAPI: HTTP surface under /api
"""

__version__ = "1.0.0"
