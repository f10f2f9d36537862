#!/usr/bin/env python
"""
チェス駒モデルのデモスクリプト

使用例:
    # 全デモを実行
    python run_demo.py

    # レジストリの登録・解除ログも表示
    python run_demo.py --verbose
"""

import argparse
import logging
import os
import sys

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src.engine import Piece, PieceKind, Color, PieceRegistry, ChessPieceError

logger = logging.getLogger("chess_pieces")


def can_text(piece: Piece, x: int, y: int) -> str:
    return "CAN" if piece.can_move_to(x, y) else "CANNOT"


def demo_creation(registry: PieceRegistry):
    """駒の作成"""
    print("=== Demo 1: Creating pieces ===")

    pieces = [
        registry.create_piece(PieceKind.ROOK, Color.WHITE, 0, 0),
        registry.create_piece(PieceKind.BISHOP, Color.BLACK, 2, 0),
        registry.create_piece(PieceKind.KNIGHT, Color.WHITE, 1, 0),
        registry.create_piece(PieceKind.QUEEN, Color.BLACK, 3, 0),
        registry.create_piece(PieceKind.KING, Color.WHITE, 4, 0),
    ]

    print(f"Pieces created: {registry.total_count}")
    print(f"White: {registry.white_count}")
    print(f"Black: {registry.black_count}")

    for piece in pieces:
        piece.release()


def demo_movement(registry: PieceRegistry):
    """移動判定"""
    print("\n=== Demo 2: Movement checks ===")

    with registry.create_piece(PieceKind.ROOK, Color.WHITE, 0, 0) as rook:
        print(f"Rook (0,0) -> (0,4): {can_text(rook, 0, 4)}")
        print(f"Rook (0,0) -> (4,0): {can_text(rook, 4, 0)}")
        print(f"Rook (0,0) -> (4,4): {can_text(rook, 4, 4)}")

    with registry.create_piece(PieceKind.KNIGHT, Color.WHITE, 4, 4) as knight:
        print(f"Knight (4,4) -> (6,5): {can_text(knight, 6, 5)}")
        print(f"Knight (4,4) reachable squares: {knight.count_possible_moves()}")


def demo_polymorphism(registry: PieceRegistry):
    """種類ごとの振る舞い"""
    print("\n=== Demo 3: Piece kinds ===")

    for kind in PieceKind:
        with registry.create_piece(kind, Color.WHITE, 3, 3) as piece:
            print(f"{piece.get_symbol()} {piece.get_type():<7} {piece.get_move_type()}")


def demo_copy(registry: PieceRegistry):
    """コピーの独立性"""
    print("\n=== Demo 4: Copying pieces ===")

    with registry.create_piece(PieceKind.ROOK, Color.WHITE, 0, 0) as original:
        with original.copy() as duplicate:
            print(f"Original: {original!r} moved={original.has_piece_moved()}")
            print(f"Copy:     {duplicate!r} moved={duplicate.has_piece_moved()}")

            duplicate.move_to(3, 0)

            print(f"Original: {original!r} moved={original.has_piece_moved()}")
            print(f"Copy:     {duplicate!r} moved={duplicate.has_piece_moved()}")


def demo_counters(registry: PieceRegistry):
    """生存数カウンタ"""
    print("\n=== Demo 5: Live counters ===")

    before = registry.total_count
    print(f"Pieces before: {before}")

    with registry.create_piece(PieceKind.ROOK, Color.WHITE, 0, 0), \
            registry.create_piece(PieceKind.ROOK, Color.WHITE, 7, 0), \
            registry.create_piece(PieceKind.BISHOP, Color.BLACK, 2, 0):
        print(f"Created 3 pieces. Now: {registry.total_count}")
        print(f"White: {registry.white_count}")
        print(f"Black: {registry.black_count}")

    print(f"After release: {registry.total_count}")


def demo_queen(registry: PieceRegistry):
    """クイーン（ルーク+ビショップ）"""
    print("\n=== Demo 6: Queen ===")

    with registry.create_piece(PieceKind.QUEEN, Color.WHITE, 3, 3) as queen:
        print(f"({queen.get_type()})")
        print(f"(3,3) -> (3,7) vertical: {can_text(queen, 3, 7)}")
        print(f"(3,3) -> (7,7) diagonal: {can_text(queen, 7, 7)}")
        print(f"Special ability: {queen.has_special_ability()}")
        print(f"Combined abilities: {queen.get_combined_abilities()}")


def demo_mini_board(registry: PieceRegistry):
    """小さな盤面"""
    print("\n=== Demo 7: Mini board ===")

    setup = [
        (PieceKind.ROOK, Color.WHITE, 0, 0),
        (PieceKind.KNIGHT, Color.WHITE, 1, 0),
        (PieceKind.BISHOP, Color.WHITE, 2, 0),
        (PieceKind.QUEEN, Color.WHITE, 3, 0),
        (PieceKind.KING, Color.WHITE, 4, 0),
        (PieceKind.ROOK, Color.BLACK, 7, 7),
        (PieceKind.KNIGHT, Color.BLACK, 6, 7),
    ]
    board = [registry.create_piece(*entry) for entry in setup]

    print(f"Pieces on board: {len(board)}")
    movable = sum(1 for piece in board if piece.count_possible_moves() > 0)
    print(f"Pieces that can move: {movable}")
    print(f"Board state valid: {'YES' if registry.validate_board_state() else 'NO'}")

    for piece in board:
        piece.release()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Chess piece model demonstration')
    parser.add_argument('--verbose', action='store_true',
                        help='Show registry and move debug logs')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("CHESS PIECE DEMOS")
    print("=" * 60)

    registry = PieceRegistry()
    try:
        demo_creation(registry)
        demo_movement(registry)
        demo_polymorphism(registry)
        demo_copy(registry)
        demo_counters(registry)
        demo_queen(registry)
        demo_mini_board(registry)
    except ChessPieceError as e:
        logger.error("demo failed: %s", e)
        print(f"\n!!! ERROR: {e}")
        return 1

    print("\n" + "=" * 60)
    print("ALL DEMOS COMPLETED")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
