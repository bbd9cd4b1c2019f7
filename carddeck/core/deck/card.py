"""
扑克牌数据结构.

定义不可变的Card类以及预创建52张牌的CardPool对象池.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .types import Suit, Rank, get_all_suits, get_all_ranks


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性由点数和花色共同决定，可用作集合元素和字典键.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.HEARTS)
        >>> str(card)
        'AH'
        >>> card == Card(Rank.ACE, Suit.HEARTS)
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        """返回"点数花色"格式的简短表示，如"AH"、"10D"."""
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_display_str(self) -> str:
        """返回使用花色符号的显示字符串，如"A♥"."""
        return f"{self.rank}{self.suit.symbol}"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"10d"、"Ts"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        rank_str, suit_str = card_str[:-1].upper(), card_str[-1].lower()

        rank_map: Dict[str, Rank] = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        if rank_str not in rank_map:
            raise ValueError(f"无效的点数: {rank_str}")
        try:
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"无效的花色: {suit_str}") from None

        return CardPool.get_card(rank_map[rank_str], suit)


class CardPool:
    """
    卡牌对象池.

    预创建所有52张卡牌的单例，牌组构造时只复制引用，避免重复创建对象.
    """
    _instances: Dict[Tuple[Rank, Suit], Card] = {}
    _initialized = False

    @classmethod
    def _initialize(cls) -> None:
        if cls._initialized:
            return

        for suit in get_all_suits():
            for rank in get_all_ranks():
                cls._instances[(rank, suit)] = Card(rank, suit)

        cls._initialized = True

    @classmethod
    def get_card(cls, rank: Rank, suit: Suit) -> Card:
        """获取指定点数和花色的卡牌对象"""
        cls._initialize()
        return cls._instances[(rank, suit)]

    @classmethod
    def get_all_cards(cls) -> List[Card]:
        """获取所有52张卡牌的新列表（按花色、点数顺序）"""
        cls._initialize()
        return list(cls._instances.values())
