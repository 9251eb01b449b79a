"""SQLite article cache with bookmark flags."""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from newsdesk.data import Article, StoredArticle
from newsdesk.errors import StorageError

logger = logging.getLogger(__name__)

_COLUMNS = "title, author, url_to_image, published_at, content, url, source_name, bookmarked"


class SQLiteArticleStore:
    """SQLite database holding one record per article URL.

    Writers are serialized with a lock shared by every operation on this
    instance, so a background upsert and a bookmark toggle on the same URL
    cannot interleave. Storage failures are logged and never raised.

    Args:
        db_path: Database file; parent directories are created on demand.
    """

    def __init__(self, db_path: Path | str) -> None:
        self.db_path = Path(db_path)
        self._write_lock = threading.Lock()
        try:
            self._init_db()
        except StorageError:
            logger.error(f"Could not initialize article store at {self.db_path}", exc_info=True)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success and always close it."""
        try:
            conn = sqlite3.connect(self.db_path, timeout=10.0)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        finally:
            conn.close()

    def _init_db(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(str(e)) from e
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS articles (
                    id INTEGER PRIMARY KEY,
                    url TEXT NOT NULL UNIQUE,
                    title TEXT NOT NULL,
                    author TEXT,
                    url_to_image TEXT,
                    published_at TEXT NOT NULL,
                    content TEXT,
                    source_name TEXT NOT NULL,
                    bookmarked INTEGER NOT NULL DEFAULT 0
                );

                CREATE INDEX IF NOT EXISTS idx_articles_published ON articles(published_at);
            """)
        logger.info(f"Article store initialized at {self.db_path}")

    def upsert_articles(self, articles: list[Article]) -> None:
        """Insert unseen articles with ``bookmarked = 0``.

        Existing rows, including their bookmark flag, are left as they are.
        """
        rows = [
            (
                a.title,
                a.author,
                a.image_url,
                a.published_at,
                a.content,
                a.url,
                a.source_name,
            )
            for a in articles
        ]
        if not rows:
            return
        try:
            with self._write_lock, self._connect() as conn:
                before = conn.total_changes
                conn.executemany(
                    """
                    INSERT OR IGNORE INTO articles
                        (title, author, url_to_image, published_at, content, url, source_name)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
                inserted = conn.total_changes - before
            logger.debug(f"Cached {inserted} new articles ({len(rows) - inserted} already stored)")
        except StorageError:
            logger.error("Failed to cache articles", exc_info=True)

    def fetch_cached_articles(self) -> list[StoredArticle]:
        return self._select("SELECT " + _COLUMNS + " FROM articles ORDER BY published_at DESC, id")

    def fetch_bookmarked(self) -> list[StoredArticle]:
        return self._select(
            "SELECT " + _COLUMNS + " FROM articles WHERE bookmarked = 1 "
            "ORDER BY published_at DESC, id"
        )

    def toggle_bookmark(self, url: str) -> bool:
        """Flip the flag for ``url`` and return the new value.

        Unknown URLs are ignored and report ``False``.
        """
        try:
            with self._write_lock, self._connect() as conn:
                rows = conn.execute(
                    "UPDATE articles SET bookmarked = 1 - bookmarked WHERE url = ? "
                    "RETURNING bookmarked",
                    (url,),
                ).fetchall()
        except StorageError:
            logger.error(f"Failed to toggle bookmark for {url}", exc_info=True)
            return False
        if not rows:
            logger.debug(f"No cached article for {url}, bookmark unchanged")
            return False
        return bool(rows[0]["bookmarked"])

    def is_bookmarked(self, url: str) -> bool:
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT 1 FROM articles WHERE url = ? AND bookmarked = 1", (url,)
                ).fetchone()
        except StorageError:
            logger.error(f"Failed to read bookmark for {url}", exc_info=True)
            return False
        return row is not None

    def count(self) -> int:
        """Number of cached records."""
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT COUNT(*) FROM articles").fetchone()
        except StorageError:
            logger.error("Failed to count cached articles", exc_info=True)
            return 0
        return int(row[0])

    def _select(self, sql: str) -> list[StoredArticle]:
        try:
            with self._connect() as conn:
                rows = conn.execute(sql).fetchall()
        except StorageError:
            logger.error("Failed to read cached articles", exc_info=True)
            return []
        return [_row_to_record(row) for row in rows]


def _row_to_record(row: sqlite3.Row) -> StoredArticle:
    article = Article(
        title=row["title"],
        url=row["url"],
        source_name=row["source_name"],
        published_at=row["published_at"],
        author=row["author"],
        image_url=row["url_to_image"],
        content=row["content"],
    )
    return StoredArticle(article=article, bookmarked=bool(row["bookmarked"]))
