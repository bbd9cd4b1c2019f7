"""
carddeck - 标准52张扑克牌组

Modules:
    core: 花色、点数、卡牌、牌组和不变量检查
    application: 配置管理和统计抽样服务
"""

__version__ = "1.0.0"

from .core import (
    Suit, Rank, Card, Deck,
    CardDeckError, InvalidOperationError, DeckExhaustedError,
)

__all__ = [
    'Suit', 'Rank', 'Card', 'Deck',
    'CardDeckError', 'InvalidOperationError', 'DeckExhaustedError',
]
