"""SQLite data store for timecard."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from timecard.constants import DATE_FORMAT
from timecard.db.base import EntrySource
from timecard.errors import CorruptEntry, DuplicateProject, EntryNotFound, ProjectNotFound
from timecard.models import Entry, Project

logger = logging.getLogger(__name__)

ENTRY_COLUMNS = "id, start, stop, week_day, code, memo"


def _row_to_entry(row: sqlite3.Row) -> Entry:
    try:
        return Entry(
            id=row["id"],
            start=row["start"],
            stop=row["stop"],
            week_day=row["week_day"],
            code=row["code"],
            memo=row["memo"],
        )
    except ValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise CorruptEntry(row["id"], reason) from e


def _row_to_project(row: sqlite3.Row) -> Project:
    return Project(id=row["id"], name=row["name"], code=row["code"])


class DataStore(EntrySource):
    """SQLite-based data store for entries and projects."""

    REQUIRED_TABLES = [
        "entries",
        "projects",
    ]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    id INTEGER PRIMARY KEY,
                    start TEXT NOT NULL,
                    stop TEXT NOT NULL,
                    week_day TEXT NOT NULL,
                    code TEXT NOT NULL,
                    memo TEXT NOT NULL
                )
            """)
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_entries_start ON entries (start)"
            )

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS projects (
                    id INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    code TEXT NOT NULL UNIQUE
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Entries ====================

    def add_entry(self, entry: Entry) -> Entry:
        """Insert an entry.

        Args:
            entry: Entry to store; its id is ignored.

        Returns:
            The stored entry with its new id.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO entries (start, stop, week_day, code, memo)
                VALUES (?, ?, ?, ?, ?)
                """,
                (entry.start, entry.stop, entry.week_day, entry.code, entry.memo),
            )
            conn.commit()
            entry_id = cursor.lastrowid
        finally:
            conn.close()

        logger.debug("Stored entry #%d for %s", entry_id, entry.code)
        return entry.model_copy(update={"id": entry_id})

    def get_entry(self, entry_id: int) -> Optional[Entry]:
        """Get an entry by id, or None if it does not exist."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {ENTRY_COLUMNS} FROM entries WHERE id = ?", (entry_id,)
            )
            row = cursor.fetchone()
            return _row_to_entry(row) if row else None
        finally:
            conn.close()

    def get_all_entries(self) -> list[Entry]:
        """Get every entry, oldest first."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {ENTRY_COLUMNS} FROM entries ORDER BY start, id")
            return [_row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_entries_between(self, start: datetime, end: datetime) -> list[Entry]:
        """Get entries whose start falls in [start, end).

        Canonical timestamps sort lexically, so the range is a plain text
        comparison.

        Args:
            start: Inclusive lower bound.
            end: Exclusive upper bound.

        Returns:
            Entries in the range ordered by start time.

        Raises:
            CorruptEntry: If a stored row in the range is not a valid entry.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                SELECT {ENTRY_COLUMNS}
                FROM entries
                WHERE start >= ? AND start < ?
                ORDER BY start, id
                """,
                (start.strftime(DATE_FORMAT), end.strftime(DATE_FORMAT)),
            )
            return [_row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_last_entry(self) -> Optional[Entry]:
        """Get the most recently recorded entry."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {ENTRY_COLUMNS} FROM entries ORDER BY id DESC LIMIT 1"
            )
            row = cursor.fetchone()
            return _row_to_entry(row) if row else None
        finally:
            conn.close()

    def update_entry(self, entry: Entry) -> None:
        """Overwrite a stored entry.

        Raises:
            EntryNotFound: If no entry has entry.id.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE entries
                SET start = ?, stop = ?, week_day = ?, code = ?, memo = ?
                WHERE id = ?
                """,
                (entry.start, entry.stop, entry.week_day, entry.code, entry.memo, entry.id),
            )
            if cursor.rowcount == 0:
                raise EntryNotFound(entry.id)
            conn.commit()
        finally:
            conn.close()

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry by id.

        Raises:
            EntryNotFound: If no entry has that id.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
            if cursor.rowcount == 0:
                raise EntryNotFound(entry_id)
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted entry #%d", entry_id)

    def delete_last_entry(self) -> Optional[Entry]:
        """Delete the most recently recorded entry.

        Returns:
            The deleted entry, or None if there were no entries.
        """
        entry = self.get_last_entry()
        if entry is None:
            return None
        self.delete_entry(entry.id)
        return entry

    # ==================== Projects ====================

    def add_project(self, project: Project) -> Project:
        """Insert a project.

        Raises:
            DuplicateProject: If the code is already registered.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO projects (name, code) VALUES (?, ?)",
                    (project.name.strip(), project.code.strip()),
                )
            except sqlite3.IntegrityError:
                raise DuplicateProject(project.code) from None
            conn.commit()
            project_id = cursor.lastrowid
        finally:
            conn.close()

        logger.debug("Stored project %s (#%d)", project.code, project_id)
        return Project(id=project_id, name=project.name.strip(), code=project.code.strip())

    def get_project(self, code: str) -> Optional[Project]:
        """Get a project by code, or None if it does not exist."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT id, name, code FROM projects WHERE code = ?", (code,))
            row = cursor.fetchone()
            return _row_to_project(row) if row else None
        finally:
            conn.close()

    def get_projects(self) -> list[Project]:
        """Get all projects ordered by code."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT id, name, code FROM projects ORDER BY code")
            return [_row_to_project(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def update_project(self, project: Project) -> None:
        """Rename a project identified by its id.

        Raises:
            ProjectNotFound: If no project has project.id.
            DuplicateProject: If the new code is taken by another project.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "UPDATE projects SET name = ?, code = ? WHERE id = ?",
                    (project.name, project.code, project.id),
                )
            except sqlite3.IntegrityError:
                raise DuplicateProject(project.code) from None
            if cursor.rowcount == 0:
                raise ProjectNotFound(project.code)
            conn.commit()
        finally:
            conn.close()

    def delete_project(self, code: str) -> None:
        """Delete a project by code.

        Entries that reference the code are kept.

        Raises:
            ProjectNotFound: If no project has that code.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM projects WHERE code = ?", (code,))
            if cursor.rowcount == 0:
                raise ProjectNotFound(code)
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted project %s", code)
