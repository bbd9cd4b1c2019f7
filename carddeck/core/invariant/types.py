"""
不变量检查器类型定义

发牌不变量只有两类，任何一项违反都意味着牌组实现有误。
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import List, Dict, Any

__all__ = [
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]


class InvariantType(Enum):
    """不变量类型枚举"""
    CARD_UNIQUENESS = auto()        # 发出的牌互不相同
    DECK_COMPLETENESS = auto()      # 完整发牌覆盖全部52张


@dataclass(frozen=True)
class InvariantViolation:
    """一项不变量违反"""
    invariant_type: InvariantType
    violation_id: str
    description: str
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.violation_id:
            raise ValueError("violation_id不能为空")
        if not self.description:
            raise ValueError("description不能为空")


@dataclass(frozen=True)
class InvariantCheckResult:
    """一次检查的结果，violations为空即通过"""
    invariant_type: InvariantType
    violations: List[InvariantViolation]
    check_duration: float  # 秒

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def violations_of(self, invariant_type: InvariantType) -> List[InvariantViolation]:
        """筛选指定类型的违反"""
        return [v for v in self.violations if v.invariant_type == invariant_type]


class InvariantError(Exception):
    """发牌结果违反不变量"""

    def __init__(self, message: str, violations: List[InvariantViolation]):
        super().__init__(message)
        self.violations = violations

    @property
    def descriptions(self) -> List[str]:
        return [v.description for v in self.violations]
