"""API middleware."""

from projectguard.interfaces.api.middleware.auth import AuthMiddleware
from projectguard.interfaces.api.middleware.cors import CORSMiddleware
from projectguard.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

__all__ = [
    "AuthMiddleware",
    "CORSMiddleware",
    "PoolLifespanMiddleware",
]
