import logging
from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

DB_PATH = "data/daygrid.db"


def make_engine(db_path=DB_PATH):
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}", echo=False)


class KeyValueStore:
    """String values by string key, in one `kv` table.

    Reads that fail count as "absent"; writes are best-effort.
    """

    def __init__(self, engine):
        self.engine = engine
        self.init_db()

    def init_db(self):
        try:
            with self.engine.begin() as conn:
                conn.execute(text("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """))
        except SQLAlchemyError as ex:
            # get/set keep failing soft until the database can be opened
            logger.warning("Could not prepare kv table: %s", ex)
            return False
        return True

    def get(self, key):
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    text("SELECT value FROM kv WHERE key = :key"), {"key": key}
                ).fetchone()
        except SQLAlchemyError as ex:
            logger.warning("Read of %s failed, treating as unset: %s", key, ex)
            return None
        if not row or not row[0]:
            return None
        return row[0]

    def set(self, key, value) -> bool:
        try:
            with self.engine.begin() as conn:
                conn.execute(text("""
                    INSERT INTO kv(key, value) VALUES(:key, :value)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """), {"key": key, "value": str(value)})
        except SQLAlchemyError as ex:
            logger.warning("Write of %s failed: %s", key, ex)
            return False
        return True

    def delete(self, key) -> bool:
        try:
            with self.engine.begin() as conn:
                conn.execute(text("DELETE FROM kv WHERE key = :key"), {"key": key})
        except SQLAlchemyError as ex:
            logger.warning("Delete of %s failed: %s", key, ex)
            return False
        return True

    def keys(self, prefix=""):
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(
                    text("SELECT key FROM kv WHERE key LIKE :pattern ORDER BY key"),
                    {"pattern": f"{prefix}%"},
                ).fetchall()
        except SQLAlchemyError as ex:
            logger.warning("Listing keys failed: %s", ex)
            return []
        return [r[0] for r in rows]
