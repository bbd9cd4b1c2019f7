"""
Core Module - 纯领域逻辑层

核心模块只依赖其他核心模块，不依赖应用层。

Modules:
    deck: 花色、点数、卡牌和牌组
    invariant: 发牌不变量检查
"""

from .deck import (
    Suit, Rank, Card, CardPool, Deck,
    CardDeckError, InvalidOperationError, DeckExhaustedError,
)
from .invariant import DeckInvariantChecker, InvariantError

__all__ = [
    'Suit', 'Rank', 'Card', 'CardPool', 'Deck',
    'CardDeckError', 'InvalidOperationError', 'DeckExhaustedError',
    'DeckInvariantChecker', 'InvariantError',
]
