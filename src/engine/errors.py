"""
駒モデルの例外定義
"""


class ChessPieceError(ValueError):
    """駒モデルの例外の基底クラス"""


class InvalidCoordinatesError(ChessPieceError):
    """盤外の座標で駒を作成しようとした"""


class OutOfBoundsError(ChessPieceError):
    """盤外のマスへ移動しようとした"""


class IllegalMoveError(ChessPieceError):
    """盤内だが駒の動きとして不可能なマスへ移動しようとした"""


class RegistryError(ChessPieceError):
    """レジストリのカウンタが不整合になった"""
