"""
チェス駒モデル
"""
