"""
扑克牌基础类型定义.

定义花色、点数两个固定枚举，共4 × 13 = 52种组合.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    值为单字母代码，symbol属性返回Unicode花色符号.
    """

    HEARTS = "h"      # 红桃
    DIAMONDS = "d"    # 方块
    CLUBS = "c"       # 梅花
    SPADES = "s"      # 黑桃

    def __str__(self) -> str:
        return self.value.upper()

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    13种点数，数值越大点数越大，A为最大.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        """返回点数的简短表示"""
        if self.value <= 10:
            return str(self.value)
        return {
            11: "J",
            12: "Q",
            13: "K",
            14: "A",
        }[self.value]


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 包含所有13种点数的列表
    """
    return list(Rank)
