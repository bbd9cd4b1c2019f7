"""
扑克牌组模块.

提供Suit、Rank、Card和Deck，实现标准52张牌的洗牌和发牌.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card, CardPool
from .deck import Deck
from .exceptions import (
    DECK_EXHAUSTED_MESSAGE,
    CardDeckError,
    InvalidOperationError,
    DeckExhaustedError,
)

__all__ = [
    'Suit', 'Rank', 'get_all_suits', 'get_all_ranks',
    'Card', 'CardPool', 'Deck',
    'DECK_EXHAUSTED_MESSAGE', 'CardDeckError', 'InvalidOperationError', 'DeckExhaustedError',
]
