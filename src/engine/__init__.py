"""
チェス駒モデル - パッケージ初期化
"""

from .piece import (
    Piece, Color, PieceKind, MovementProfile,
    PIECE_SYMBOLS, PIECE_NAMES, PIECE_MOVE_PATTERNS, BOARD_SIZE, is_on_board, is_coordinate
)
from .registry import PieceRegistry, RegistryConfig
from .errors import (
    ChessPieceError, InvalidCoordinatesError, OutOfBoundsError,
    IllegalMoveError, RegistryError
)

__all__ = [
    'Piece',
    'Color',
    'PieceKind',
    'MovementProfile',
    'PIECE_SYMBOLS',
    'PIECE_NAMES',
    'PIECE_MOVE_PATTERNS',
    'BOARD_SIZE',
    'is_on_board',
    'is_coordinate',
    'PieceRegistry',
    'RegistryConfig',
    'ChessPieceError',
    'InvalidCoordinatesError',
    'OutOfBoundsError',
    'IllegalMoveError',
    'RegistryError',
]
