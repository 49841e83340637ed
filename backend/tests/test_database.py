"""
Foody Backend: Session Dependency Tests
=========================================

What:  Tests for get_db_session commit/rollback behaviour.
How:   The session factory is patched with a mock session; no database.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from sqlalchemy.exc import OperationalError

from app.database import get_db_session
from app.exceptions import DatabaseError


def _factory_for(session):
    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=session)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    return factory


class TestGetDbSession:

    @pytest.mark.asyncio
    async def test_commits_after_handler_succeeds(self, mock_db_session):
        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            assert await gen.__anext__() is mock_db_session
            with pytest.raises(StopAsyncIteration):
                await gen.__anext__()

        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_not_awaited()
        mock_db_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_becomes_database_error(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
        )

        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(DatabaseError) as exc_info:
                await gen.__anext__()

        assert exc_info.value.context["error_type"] == "OperationalError"
        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_handler_error_rolls_back_and_propagates(self, mock_db_session):
        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(ValueError):
                await gen.athrow(ValueError("bad handler"))

        mock_db_session.commit.assert_not_awaited()
        mock_db_session.rollback.assert_awaited_once()
