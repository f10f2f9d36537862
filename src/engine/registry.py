"""
生存している駒の数を色ごとに管理するモジュール
"""

import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .errors import RegistryError
from .piece import Piece, PieceKind, Color

logger = logging.getLogger(__name__)


class RegistryConfig(BaseModel):
    """レジストリの設定"""
    max_pieces_per_color: int = Field(default=16, ge=1)  # 合法な局面での上限


class PieceRegistry:
    """
    駒の登録と解除を受け付け、色ごとの生存数を数えるクラス
    上限は検査するだけで、超えても駒の作成は拒否しない
    """

    def __init__(self, config: Optional[RegistryConfig] = None):
        self.config = config or RegistryConfig()
        self.counts: Dict[Color, int] = {
            Color.WHITE: 0,
            Color.BLACK: 0
        }

    def __repr__(self):
        return f"PieceRegistry(white={self.white_count}, black={self.black_count})"

    def _register(self, color: Color):
        self.counts[color] += 1
        logger.debug("registered %s piece (now %d)", color.name, self.counts[color])

    def _unregister(self, color: Color):
        if self.counts[color] <= 0:
            raise RegistryError(f"No live {color.name} pieces to unregister")
        self.counts[color] -= 1
        logger.debug("unregistered %s piece (now %d)", color.name, self.counts[color])

    def create_piece(self, kind: PieceKind, color: Color, x: int, y: int) -> Piece:
        """このレジストリに登録された駒を作成"""
        return Piece(kind, color, x, y, registry=self)

    def get_count(self, color: Color) -> int:
        return self.counts[color]

    @property
    def white_count(self) -> int:
        return self.counts[Color.WHITE]

    @property
    def black_count(self) -> int:
        return self.counts[Color.BLACK]

    @property
    def total_count(self) -> int:
        return self.white_count + self.black_count

    def validate_board_state(self) -> bool:
        """各色の駒数が上限以下か確認"""
        limit = self.config.max_pieces_per_color
        return self.white_count <= limit and self.black_count <= limit

    def to_dict(self) -> dict:
        return {
            "white": self.white_count,
            "black": self.black_count,
            "total": self.total_count,
            "valid": self.validate_board_state(),
        }
