"""
Tests for database configuration and initialization
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.database import check_db_connection, get_db, get_engine_options, init_db


class TestDatabaseConfiguration:
    """Test database configuration"""

    def test_get_db_yields_session(self):
        """Test that get_db yields a database session"""
        db_gen = get_db()
        db = next(db_gen)

        assert isinstance(db, Session)

        # Cleanup
        try:
            next(db_gen)
        except StopIteration:
            pass

    def test_sqlite_engine_options(self):
        assert get_engine_options("sqlite://") == {"connect_args": {"check_same_thread": False}}

    def test_postgres_engine_options(self):
        options = get_engine_options("postgresql://user:pw@db:5432/salesops")

        assert options["pool_pre_ping"] is True
        assert options["pool_size"] >= 1
        assert "connect_args" not in options


class TestConnectivityCheck:
    """Test readiness database probe"""

    def test_healthy_session(self, db_session):
        assert check_db_connection(db_session) is True

    def test_failing_session(self):
        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))

        assert check_db_connection(db) is False


class TestInitDb:
    """Test table creation at startup"""

    def test_creates_tables(self):
        with patch("app.database.Base.metadata.create_all") as mock_create:
            init_db()

        mock_create.assert_called_once()

    def test_retries_while_database_starts(self):
        down = OperationalError("CREATE TABLE", {}, Exception("connection refused"))

        with patch("app.database.Base.metadata.create_all", side_effect=[down, None]) as mock_create:
            with patch.object(init_db.retry, "sleep"):
                init_db()

        assert mock_create.call_count == 2

    def test_gives_up_after_three_attempts(self):
        down = OperationalError("CREATE TABLE", {}, Exception("connection refused"))

        with patch("app.database.Base.metadata.create_all", side_effect=down) as mock_create:
            with patch.object(init_db.retry, "sleep"):
                with pytest.raises(OperationalError):
                    init_db()

        assert mock_create.call_count == 3

    def test_existing_objects_are_tolerated(self):
        with patch(
            "app.database.Base.metadata.create_all",
            side_effect=RuntimeError("relation already exists"),
        ):
            init_db()
