"""
Application Layer - 应用服务层

在核心牌组之上提供配置管理和统计抽样服务。
"""

from .types import QueryResult, ResultStatus
from .config_service import ConfigService, ConfigType, DeckConfig, SamplingConfig, LoggingConfig
from .sampling_service import (
    SamplingService,
    SamplingReport,
    first_card_has_suit,
    first_card_has_rank,
    two_cards_share_suit,
    two_cards_share_rank,
)

__all__ = [
    'QueryResult', 'ResultStatus',
    'ConfigService', 'ConfigType', 'DeckConfig', 'SamplingConfig', 'LoggingConfig',
    'SamplingService', 'SamplingReport',
    'first_card_has_suit', 'first_card_has_rank',
    'two_cards_share_suit', 'two_cards_share_rank',
]
