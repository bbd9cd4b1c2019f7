"""
扑克牌组管理.

定义Deck类：构造时装入完整的52张牌并洗牌，之后只能逐张发牌直至发完.
"""

import logging
import random
from typing import List, Optional

from .card import Card, CardPool
from .exceptions import DeckExhaustedError

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副已洗好的扑克牌.

    构造时包含52张各不相同的牌，顺序为均匀随机排列.
    牌数只减不增，已发出的牌不会再次发出.
    使用可注入的随机数生成器以支持确定性测试.

    状态:
        Active: 剩余1到52张牌
        Exhausted: 剩余0张牌，终止状态，此后每次deal()都失败

    Attributes:
        _cards: 剩余牌列表，列表末尾为牌顶
        _rng: 本实例独占的随机数生成器

    Examples:
        >>> deck = Deck(random.Random(42))
        >>> deck.size()
        52
        >>> card = deck.deal()
        >>> deck.size()
        51
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化并洗牌.

        Args:
            rng: 随机数生成器。如果为None，创建一个非确定性种子的新生成器
        """
        self._rng = rng if rng is not None else random.Random()
        self._cards: List[Card] = CardPool.get_all_cards()
        self._rng.shuffle(self._cards)
        logger.debug("新牌组已洗好: %d 张牌", len(self._cards))

    def size(self) -> int:
        """
        获取剩余牌数.

        Returns:
            int: 尚未发出的牌数
        """
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """牌组是否已发完"""
        return not self._cards

    def deal(self) -> Card:
        """
        从牌顶发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            DeckExhaustedError: 当牌组为空时，牌组保持不变
        """
        if not self._cards:
            logger.warning("牌组已空，拒绝发牌")
            raise DeckExhaustedError()

        card = self._cards.pop()
        if not self._cards:
            logger.debug("最后一张牌已发出，牌组进入Exhausted状态")
        return card

    def deal_cards(self, count: int) -> List[Card]:
        """
        一次发多张牌.

        要么全部发出，要么一张都不发.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发出顺序排列的牌

        Raises:
            ValueError: 当count为负数时
            DeckExhaustedError: 当剩余牌数不足时
        """
        if count < 0:
            raise ValueError(f"发牌数量不能为负数: {count}")
        if count > len(self._cards):
            logger.warning("剩余 %d 张牌，无法发 %d 张", len(self._cards), count)
            raise DeckExhaustedError()

        return [self.deal() for _ in range(count)]

    def peek_top(self) -> Optional[Card]:
        """
        查看牌顶的牌但不发出.

        Returns:
            Optional[Card]: 下一次deal()将返回的牌，牌组为空时返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
