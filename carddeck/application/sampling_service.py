"""
Sampling Service - 发牌统计抽样服务

反复创建新牌组并对每副牌求值一个谓词，统计命中率，
直到命中率收敛到期望概率附近或超出时间/次数上限。
用于验证洗牌的均匀性，例如首张牌花色为某一花色的概率应为1/4。
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional

from ..core.deck import Deck, Rank, Suit
from .config_service import SamplingConfig
from .types import QueryResult

DeckPredicate = Callable[[Deck], bool]
DeckFactory = Callable[[], Deck]


@dataclass(frozen=True)
class SamplingReport:
    """一次抽样的统计结果"""
    name: str
    trials: int
    hits: int
    expected: float
    epsilon: float
    elapsed_seconds: float
    converged: bool

    @property
    def observed(self) -> float:
        """观测到的命中率"""
        if self.trials == 0:
            return 0.0
        return self.hits / self.trials

    @property
    def delta(self) -> float:
        """观测命中率与期望概率的绝对误差"""
        return abs(self.observed - self.expected)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        data = asdict(self)
        data['observed'] = self.observed
        data['delta'] = self.delta
        return data


class SamplingService:
    """发牌统计抽样服务

    每次试验都使用deck_factory创建一副全新的牌组，试验之间互不影响。
    """

    def __init__(self, config: Optional[SamplingConfig] = None,
                 deck_factory: Optional[DeckFactory] = None):
        """
        Args:
            config: 抽样配置，默认使用SamplingConfig()
            deck_factory: 创建新牌组的工厂，默认为Deck
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or SamplingConfig()
        self._deck_factory = deck_factory or Deck

    def estimate(self, predicate: DeckPredicate, expected: float,
                 epsilon: Optional[float] = None, name: str = "") -> QueryResult[SamplingReport]:
        """
        估计谓词在新牌组上成立的概率

        至少运行min_trials次；之后一旦|命中率 - expected| <= epsilon即视为收敛。
        超过timeout_seconds或max_trials仍未收敛则返回失败结果。
        谓词抛出的异常直接向上传播。

        Args:
            predicate: 对一副新牌组求值的谓词，可以从牌组发牌
            expected: 期望概率，取值[0, 1]
            epsilon: 允许误差，默认使用配置中的epsilon
            name: 报告和日志中使用的名称

        Returns:
            查询结果，包含SamplingReport；未收敛时success为False但仍携带报告
        """
        if not 0.0 <= expected <= 1.0:
            return QueryResult.validation_error(
                f"期望概率必须在[0, 1]之间，当前为: {expected}",
                error_code="INVALID_EXPECTED_PROBABILITY"
            )
        if epsilon is None:
            epsilon = self.config.epsilon
        if epsilon <= 0:
            return QueryResult.validation_error(
                f"epsilon必须为正数，当前为: {epsilon}",
                error_code="INVALID_EPSILON"
            )

        name = name or getattr(predicate, '__name__', 'predicate')
        config = self.config
        start_time = time.perf_counter()
        deadline = start_time + config.timeout_seconds
        trials = 0
        hits = 0
        converged = False

        while trials < config.max_trials:
            if predicate(self._deck_factory()):
                hits += 1
            trials += 1

            if trials >= config.min_trials and abs(hits / trials - expected) <= epsilon:
                converged = True
                break
            if time.perf_counter() > deadline:
                break

        report = SamplingReport(
            name=name,
            trials=trials,
            hits=hits,
            expected=expected,
            epsilon=epsilon,
            elapsed_seconds=time.perf_counter() - start_time,
            converged=converged
        )
        self.logger.info(
            f"{name} | trials: {trials} | hits: {hits} | delta: {report.delta:.6f} (epsilon = {epsilon})"
        )

        if not converged:
            self.logger.warning(f"{name} 未在限定范围内收敛")
            return QueryResult.failure_result(
                f"抽样未收敛: delta={report.delta:.6f} > epsilon={epsilon}",
                error_code="SAMPLING_NOT_CONVERGED",
                data=report
            )
        return QueryResult.success_result(report)


def first_card_has_suit(suit: Suit) -> DeckPredicate:
    """首张牌为指定花色，期望概率1/4"""
    def predicate(deck: Deck) -> bool:
        return deck.deal().suit == suit
    predicate.__name__ = f"first_card_has_suit_{suit.name.lower()}"
    return predicate


def first_card_has_rank(rank: Rank) -> DeckPredicate:
    """首张牌为指定点数，期望概率1/13"""
    def predicate(deck: Deck) -> bool:
        return deck.deal().rank == rank
    predicate.__name__ = f"first_card_has_rank_{rank.name.lower()}"
    return predicate


def two_cards_share_suit(deck: Deck) -> bool:
    """连续两张牌花色相同，期望概率12/51"""
    first, second = deck.deal(), deck.deal()
    return first.suit == second.suit


def two_cards_share_rank(deck: Deck) -> bool:
    """连续两张牌点数相同，期望概率3/51"""
    first, second = deck.deal(), deck.deal()
    return first.rank == second.rank
