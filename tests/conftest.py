"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def registry():
    """空のレジストリを提供するフィクスチャ"""
    from src.engine import PieceRegistry
    return PieceRegistry()


@pytest.fixture
def white_rook(registry):
    """(0, 0)の白のルークを提供するフィクスチャ"""
    from src.engine import PieceKind, Color
    return registry.create_piece(PieceKind.ROOK, Color.WHITE, 0, 0)


@pytest.fixture
def white():
    """白を提供するフィクスチャ"""
    from src.engine import Color
    return Color.WHITE


@pytest.fixture
def black():
    """黒を提供するフィクスチャ"""
    from src.engine import Color
    return Color.BLACK
