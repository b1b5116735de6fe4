"""Test cases for backing store liveness."""

from unittest.mock import patch, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from agenda.database import BackingStore, check_database_connection
from agenda.errors import UpstreamUnavailableError


class TestCheckDatabaseConnection:
    @patch('agenda.database.engine.connect')
    def test_check_database_connection_success(self, mock_connect):
        """Test successful database connection check."""
        mock_conn = MagicMock()
        mock_connect.return_value.__enter__.return_value = mock_conn

        assert check_database_connection() is True
        mock_conn.execute.assert_called_once()

    @patch('agenda.database.engine.connect')
    def test_check_database_connection_failure(self, mock_connect):
        """Test database connection check failure."""
        mock_connect.side_effect = SQLAlchemyError("Connection failed")

        assert check_database_connection() is False


class TestBackingStore:
    def test_starts_not_ready(self):
        store = BackingStore(probe=lambda: True)
        assert store.ready is False
        with pytest.raises(UpstreamUnavailableError):
            store.require_ready()

    def test_connect_records_probe_result(self):
        store = BackingStore(probe=lambda: True)
        assert store.connect() is True
        store.require_ready()

        down = BackingStore(probe=lambda: False)
        assert down.connect() is False
        assert down.ready is False

    @patch('agenda.database.check_database_connection', return_value=True)
    def test_default_probe_is_database_check(self, mock_check):
        store = BackingStore()
        assert store.connect() is True
        mock_check.assert_called_once_with()
