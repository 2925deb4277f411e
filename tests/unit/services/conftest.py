from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_logger():
    """Logger のモックフィクスチャ（ログ出力の検証用）"""
    return MagicMock()
