from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from favfilms.common.logging import get_logger
from favfilms.domain.errors import StorageError

logger = get_logger(__name__)


def storage_error(e: SQLAlchemyError) -> StorageError:
    # pass the driver message through verbatim when there is one
    orig = getattr(e, "orig", None)
    msg = str(orig) if orig is not None else str(e)
    logger.error("Storage failure: %s", msg)
    return StorageError(msg)
