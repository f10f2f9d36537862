"""
チェスの駒の種類と動きを定義するモジュール
"""

import logging
import weakref
from enum import Enum, auto
from typing import List, Tuple, Optional, NamedTuple, TYPE_CHECKING

from .errors import InvalidCoordinatesError, OutOfBoundsError, IllegalMoveError

if TYPE_CHECKING:
    from .registry import PieceRegistry

logger = logging.getLogger(__name__)

# 盤面サイズ
BOARD_SIZE = 8


class Color(Enum):
    """駒の色の定義"""
    WHITE = 0  # 先手（白）
    BLACK = 1  # 後手（黒）

    @property
    def opponent(self):
        """相手の色を返す"""
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceKind(Enum):
    """駒の種類"""
    ROOK = auto()    # ルーク - 縦横に何マスでも
    BISHOP = auto()  # ビショップ - 斜めに何マスでも
    KNIGHT = auto()  # ナイト - 桂馬跳び（飛び越え可能）
    QUEEN = auto()   # クイーン - ルーク+ビショップ
    KING = auto()    # キング - 全方向1マス


class MovementProfile(NamedTuple):
    """
    駒の動きの能力セット
    スライド系は3つのフラグ、ジャンプ系はオフセットの集合で表す
    """
    horizontal: bool = False
    vertical: bool = False
    diagonal: bool = False
    offsets: Tuple[Tuple[int, int], ...] = ()
    combines: Tuple[PieceKind, ...] = ()

    @property
    def is_sliding(self) -> bool:
        return self.horizontal or self.vertical or self.diagonal

    @property
    def is_jumping(self) -> bool:
        return len(self.offsets) > 0


# 駒の表示記号
PIECE_SYMBOLS = {
    PieceKind.ROOK: "R",
    PieceKind.BISHOP: "B",
    PieceKind.KNIGHT: "N",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

# 駒の表示名
PIECE_NAMES = {
    PieceKind.ROOK: "Rook",
    PieceKind.BISHOP: "Bishop",
    PieceKind.KNIGHT: "Knight",
    PieceKind.QUEEN: "Queen",
    PieceKind.KING: "King",
}

# 駒の動きパターン定義
# [dx, dy]で表現: 盤面の向きに依存しないので色による反転はない
PIECE_MOVE_PATTERNS = {
    PieceKind.ROOK: MovementProfile(horizontal=True, vertical=True),
    PieceKind.BISHOP: MovementProfile(diagonal=True),
    PieceKind.QUEEN: MovementProfile(
        horizontal=True, vertical=True, diagonal=True,
        combines=(PieceKind.ROOK, PieceKind.BISHOP),
    ),
    PieceKind.KNIGHT: MovementProfile(
        offsets=((1, 2), (2, 1), (2, -1), (1, -2),
                 (-1, -2), (-2, -1), (-2, 1), (-1, 2)),
    ),
    PieceKind.KING: MovementProfile(
        offsets=((-1, -1), (-1, 0), (-1, 1), (0, -1),
                 (0, 1), (1, -1), (1, 0), (1, 1)),
    ),
}


def is_coordinate(value) -> bool:
    """座標として使える整数か確認（boolは除く）"""
    return isinstance(value, int) and not isinstance(value, bool)


def is_on_board(x: int, y: int) -> bool:
    """座標が盤面内か確認"""
    if not (is_coordinate(x) and is_coordinate(y)):
        return False
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class Piece:
    """チェスの駒を表すクラス"""

    def __init__(
        self,
        kind: PieceKind,
        color: Color,
        x: int,
        y: int,
        registry: Optional['PieceRegistry'] = None
    ):
        if not is_on_board(x, y):
            raise InvalidCoordinatesError(
                f"Coordinates must be integers in range 0-{BOARD_SIZE - 1}: ({x!r}, {y!r})"
            )
        self._kind = kind
        self._color = color
        self._x = x
        self._y = y
        self._has_moved = False
        self._registry = registry
        self._finalizer = None

        # 座標チェックを通過した駒だけを登録する
        if registry is not None:
            registry._register(color)
            self._finalizer = weakref.finalize(self, registry._unregister, color)

    # 作成後に変わらない値と、move_toでしか変わらない値は読み取り専用
    @property
    def kind(self) -> PieceKind:
        return self._kind

    @property
    def color(self) -> Color:
        return self._color

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def has_moved(self) -> bool:
        return self._has_moved

    @property
    def registry(self) -> Optional['PieceRegistry']:
        return self._registry

    @property
    def profile(self) -> MovementProfile:
        return PIECE_MOVE_PATTERNS[self.kind]

    def __str__(self):
        """駒の文字列表現（例: 'wR', 'bN'）"""
        prefix = 'w' if self.color == Color.WHITE else 'b'
        return f"{prefix}{PIECE_SYMBOLS[self.kind]}"

    def __repr__(self):
        return f"Piece({self.kind.name}, {self.color.name}, ({self.x}, {self.y}))"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def copy(self) -> 'Piece':
        """
        同じ種類・色・位置・移動状態の独立した駒を作成
        元の駒と同じレジストリに新しい駒として登録される
        """
        duplicate = Piece(
            self.kind, self.color, self.x, self.y,
            registry=self.registry if self.is_registered() else None,
        )
        duplicate._has_moved = self._has_moved
        return duplicate

    def release(self):
        """レジストリから登録を解除する（2回目以降は何もしない）"""
        if self._finalizer is not None:
            self._finalizer()

    def is_registered(self) -> bool:
        return self._finalizer is not None and self._finalizer.alive

    # ---- アクセサ ----

    def get_color(self) -> Color:
        return self.color

    def get_position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def has_piece_moved(self) -> bool:
        return self.has_moved

    def get_symbol(self) -> str:
        return PIECE_SYMBOLS[self.kind]

    def get_type(self) -> str:
        return PIECE_NAMES[self.kind]

    # ---- 能力 ----

    def is_sliding(self) -> bool:
        return self.profile.is_sliding

    def is_jumping(self) -> bool:
        return self.profile.is_jumping

    def has_special_ability(self) -> bool:
        """複数の駒の動きを組み合わせた駒（クイーン）かどうか"""
        return len(self.profile.combines) > 0

    def get_combined_abilities(self) -> str:
        """
        組み合わせている駒の名前を返す（例: 'Rook + Bishop'）
        組み合わせを持たない駒は自分の種類名を返す
        """
        combines = self.profile.combines
        if not combines:
            return self.get_type()
        return " + ".join(PIECE_NAMES[kind] for kind in combines)

    def get_move_type(self) -> str:
        """動ける方向の説明を返す"""
        profile = self.profile
        if profile.is_jumping:
            return "Jump"

        h, v, d = profile.horizontal, profile.vertical, profile.diagonal
        if h and v and d:
            return "All directions (horizontal, vertical, diagonal)"
        elif h and v:
            return "Horizontal and vertical"
        elif h and d:
            return "Horizontal and diagonal"
        elif v and d:
            return "Vertical and diagonal"
        elif h:
            return "Horizontal only"
        elif v:
            return "Vertical only"
        elif d:
            return "Diagonal only"
        else:
            return "Unknown"

    # ---- 移動 ----

    def can_move_to(self, new_x: int, new_y: int) -> bool:
        """
        空の盤面で(new_x, new_y)へ動けるか判定する
        途中の駒による妨害は考慮しない
        """
        # 同じマスには動けない
        if new_x == self.x and new_y == self.y:
            return False

        if not is_on_board(new_x, new_y):
            return False

        profile = self.profile
        dx = new_x - self.x
        dy = new_y - self.y

        if profile.is_jumping:
            return (dx, dy) in profile.offsets

        # 横方向（同じ行）
        if new_y == self.y and profile.horizontal:
            return True

        # 縦方向（同じ列）
        if new_x == self.x and profile.vertical:
            return True

        # 斜め方向
        if abs(dx) == abs(dy) and profile.diagonal:
            return True

        return False

    def move_to(self, new_x: int, new_y: int):
        """
        駒を移動する
        失敗した場合は例外を送出し、位置と移動状態は変更しない
        """
        if not (is_coordinate(new_x) and is_coordinate(new_y)):
            raise InvalidCoordinatesError(
                f"Coordinates must be integers: ({new_x!r}, {new_y!r})"
            )

        if not is_on_board(new_x, new_y):
            raise OutOfBoundsError(
                f"Target is off the board (0-{BOARD_SIZE - 1}): ({new_x}, {new_y})"
            )

        if not self.can_move_to(new_x, new_y):
            raise IllegalMoveError(
                f"{self.get_type()} cannot move from {self.get_position()} to ({new_x}, {new_y})"
            )

        logger.debug("%s moves %s -> (%d, %d)", self, self.get_position(), new_x, new_y)
        self._x = new_x
        self._y = new_y
        self._has_moved = True

    def get_reachable_squares(self) -> List[Tuple[int, int]]:
        """移動可能なマスを行優先の順で返す"""
        return [
            (x, y)
            for x in range(BOARD_SIZE)
            for y in range(BOARD_SIZE)
            if self.can_move_to(x, y)
        ]

    def count_possible_moves(self) -> int:
        """
        移動可能なマスの数を返す
        ジャンプ系の駒は盤内に収まるオフセットの数と一致する
        """
        profile = self.profile
        if profile.is_jumping:
            return sum(
                1 for dx, dy in profile.offsets
                if is_on_board(self.x + dx, self.y + dy)
            )
        return len(self.get_reachable_squares())

    def to_dict(self) -> dict:
        """駒を辞書形式に変換"""
        return {
            "kind": self.kind.name,
            "color": self.color.name,
            "position": self.get_position(),
            "has_moved": self.has_moved,
            "symbol": self.get_symbol(),
        }
