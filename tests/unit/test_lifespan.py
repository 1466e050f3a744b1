"""
Unit tests for application lifecycle.
"""

from unittest.mock import MagicMock, patch

import pytest

from libraryapi.lifespan import lifespan


@pytest.mark.asyncio
async def test_lifespan_closes_infrastructure():
    """Test storage is released on shutdown."""
    # Arrange
    mock_app = MagicMock()

    # Act
    async with lifespan(mock_app):
        mock_app.state.infrastructure.close.assert_not_called()

    # Assert
    mock_app.state.infrastructure.close.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_logs_startup_and_shutdown():
    """Test lifespan logs its events."""
    mock_app = MagicMock()

    with patch("libraryapi.lifespan.logger") as mock_logger:
        async with lifespan(mock_app):
            pass

        assert mock_logger.info.call_count >= 3
