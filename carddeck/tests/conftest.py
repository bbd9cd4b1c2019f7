"""
Test Configuration - pytest配置文件

提供通用fixture和测试标记：
- 可重现的随机数生成器和牌组
- 完整的参考牌集合
- 反作弊检查器
"""

import random
from typing import Set

import pytest

from carddeck.core.deck import Card, Deck, Rank, Suit
from carddeck.tests.anti_cheat.core_usage_checker import CoreUsageChecker


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(20240601)


@pytest.fixture
def deck(seeded_rng):
    """可重现的新牌组"""
    return Deck(seeded_rng)


@pytest.fixture
def reference_cards() -> Set[Card]:
    """独立构造的52张参考牌"""
    return {Card(rank, suit) for suit in Suit for rank in Rank}


@pytest.fixture
def core_usage_checker():
    """核心使用检查器fixture"""
    return CoreUsageChecker()


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "statistical: 标记需要大量抽样的统计测试"
    )
