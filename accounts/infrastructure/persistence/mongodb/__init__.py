"""MongoDB persistence helpers."""

from accounts.infrastructure.persistence.mongodb.base import MongoBaseRepository
from accounts.infrastructure.persistence.mongodb.connection import MongoConnection

__all__ = ["MongoBaseRepository", "MongoConnection"]
