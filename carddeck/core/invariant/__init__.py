"""
不变量检查模块

验证发牌结果满足唯一性和完整性。
"""

from .types import InvariantType, InvariantViolation, InvariantCheckResult, InvariantError
from .deck_checker import DeckInvariantChecker

__all__ = [
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError',
    'DeckInvariantChecker',
]
