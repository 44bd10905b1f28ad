# favfilms/database/models/__init__.py

from favfilms.database.core.main import Base
from favfilms.database.models.catalog import CatalogEntry
from favfilms.database.models.user import User

__all__ = [
    "Base",
    "CatalogEntry",
    "User",
]
