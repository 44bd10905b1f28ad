# favfilms/database/core/main.py
from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import MetaData, create_engine, Column, Table, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from favfilms.common.logging import get_logger

logger = get_logger(__name__)

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated")

class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        # Stable ordering: ServiceObject fields first, then everything else in their original order
        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def build_engine(url: str, *, echo: bool = False, pool_size: int = 10, max_overflow: int = 20,
                 pool_pre_ping: bool = True, pool_recycle: int = 1800, **engine_kw: Any) -> Engine:
    """
    Create an Engine for `url`. Pool sizing only applies to server databases;
    SQLite URLs (tests, local runs) take whatever pool is passed in `engine_kw`.
    """
    kw: dict[str, Any] = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kw["connect_args"] = {"check_same_thread": False}
    elif "poolclass" not in engine_kw:
        kw.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=pool_pre_ping,
            pool_recycle=pool_recycle,
        )
    kw.update(engine_kw)
    return create_engine(url, **kw)


class Database:
    """
    Explicitly constructed store handle. The app connects it in its lifespan
    and disposes it on shutdown; tests build one against SQLite or a
    throwaway Postgres and hand it to `create_app`.
    """

    def __init__(self, url: str, **engine_kw: Any) -> None:
        self.url = url
        self._engine_kw = engine_kw
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker[Session]] = None

    @classmethod
    def from_settings(cls, cfg) -> "Database":
        return cls(
            cfg.database_url,
            echo=cfg.db.echo,
            pool_size=cfg.db.pool_size,
            max_overflow=cfg.db.max_overflow,
            pool_pre_ping=cfg.db.pool_pre_ping,
            pool_recycle=cfg.db.pool_recycle,
        )

    @property
    def connected(self) -> bool:
        return self.engine is not None

    def connect(self) -> None:
        if self.engine is not None:
            return
        self.engine = build_engine(self.url, **self._engine_kw)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False, future=True, autoflush=False)
        logger.info("Database engine created (%s)", self.engine.url.render_as_string(hide_password=True))

    def disconnect(self) -> None:
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database engine disposed")

    def create_schema(self) -> None:
        self.connect()
        # Importing the models registers their tables on Base.metadata
        import favfilms.database.models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def drop_schema(self) -> None:
        self.connect()
        import favfilms.database.models  # noqa: F401
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        self.connect()
        return self.SessionLocal()

    def health_check(self) -> bool:
        try:
            with self.session() as s:
                s.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False
