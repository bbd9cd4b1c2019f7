"""
牌组不变量检查器

检查从同一副牌发出的牌序列：
- 唯一性：任意两张发出的牌都不相同
- 完整性：完整发完时恰好覆盖52张，每种花色13张、每种花色内每个点数一张
"""

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence
import logging
import time
import uuid

from ..deck.card import Card, CardPool
from ..deck.types import get_all_suits, get_all_ranks
from .types import InvariantType, InvariantViolation, InvariantCheckResult, InvariantError

__all__ = ['DeckInvariantChecker']

logger = logging.getLogger(__name__)


class DeckInvariantChecker:
    """牌组不变量检查器"""

    def __init__(self):
        self._violations: List[InvariantViolation] = []

    def check_partial(self, cards: Sequence[Card]) -> InvariantCheckResult:
        """只检查唯一性，适用于尚未发完的牌组

        Args:
            cards: 已发出的牌，按发出顺序

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        self._check_unique(cards)
        return self._build_result(InvariantType.CARD_UNIQUENESS, start_time)

    def check(self, cards: Sequence[Card]) -> InvariantCheckResult:
        """检查一次完整发牌的唯一性和完整性

        Args:
            cards: 从一副新牌发出的全部牌

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        self._check_unique(cards)
        self._check_complete(cards)
        return self._build_result(InvariantType.DECK_COMPLETENESS, start_time)

    def validate_or_raise(self, cards: Sequence[Card]) -> None:
        """检查完整发牌，失败时抛出InvariantError

        Raises:
            InvariantError: 存在任何违反记录时
        """
        result = self.check(cards)
        if not result.is_valid:
            raise InvariantError(
                f"牌组不变量检查失败: {len(result.violations)} 项违反",
                result.violations
            )

    def _check_unique(self, cards: Sequence[Card]) -> None:
        counts = Counter(cards)
        duplicates = sorted(str(card) for card, count in counts.items() if count > 1)
        if duplicates:
            self._create_violation(
                InvariantType.CARD_UNIQUENESS,
                description=f"发现重复发出的牌: {', '.join(duplicates)}",
                context={'duplicates': duplicates}
            )

    def _check_complete(self, cards: Sequence[Card]) -> None:
        dealt = set(cards)
        missing = [str(card) for card in CardPool.get_all_cards() if card not in dealt]
        if missing:
            self._create_violation(
                InvariantType.DECK_COMPLETENESS,
                description=f"缺少 {len(missing)} 张牌",
                context={'missing': missing}
            )

        expected_per_suit = len(get_all_ranks())
        per_suit = Counter(card.suit for card in cards)
        for suit in get_all_suits():
            if per_suit[suit] != expected_per_suit:
                self._create_violation(
                    InvariantType.DECK_COMPLETENESS,
                    description=f"花色 {suit.name} 有 {per_suit[suit]} 张，应为 {expected_per_suit} 张",
                    context={'suit': suit.name, 'count': per_suit[suit]}
                )

    def _create_violation(self, invariant_type: InvariantType, description: str,
                          context: Optional[Dict[str, Any]] = None) -> InvariantViolation:
        violation = InvariantViolation(
            invariant_type=invariant_type,
            violation_id=f"{invariant_type.name.lower()}_{uuid.uuid4().hex[:8]}",
            description=description,
            context=context or {}
        )

        self._violations.append(violation)
        return violation

    def _build_result(self, invariant_type: InvariantType, start_time: float) -> InvariantCheckResult:
        if self._violations:
            logger.error("牌组不变量违反: %s", "; ".join(v.description for v in self._violations))

        return InvariantCheckResult(
            invariant_type=invariant_type,
            violations=self._violations.copy(),
            check_duration=time.perf_counter() - start_time
        )
