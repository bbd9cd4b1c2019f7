"""
ConfigService - 配置管理服务

负责集中化管理所有配置，包括：
- 牌组配置（随机种子）
- 统计抽样配置
- 日志配置

为Application层提供统一的配置管理接口，所有查询都返回QueryResult。
"""

import dataclasses
import logging
import random
from typing import Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum

from ..core.deck import Deck
from .types import QueryResult

_VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    SAMPLING = "sampling"
    LOGGING = "logging"


@dataclass
class DeckConfig:
    """牌组配置"""
    seed: Optional[int] = None  # None表示非确定性洗牌

    def __post_init__(self):
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError(f"seed必须是整数或None，当前为: {self.seed!r}")


@dataclass
class SamplingConfig:
    """统计抽样配置"""
    min_trials: int = 100
    max_trials: int = 200_000
    timeout_seconds: float = 2.0
    epsilon: float = 0.005

    def __post_init__(self):
        """验证抽样参数"""
        for name in ('min_trials', 'max_trials'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name}必须是整数，当前为: {value!r}")
        for name in ('timeout_seconds', 'epsilon'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name}必须是数值，当前为: {value!r}")

        if self.min_trials < 1:
            raise ValueError(f"min_trials必须为正数，当前为: {self.min_trials}")
        if self.max_trials < self.min_trials:
            raise ValueError(f"max_trials({self.max_trials})不能小于min_trials({self.min_trials})")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds必须为正数，当前为: {self.timeout_seconds}")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon必须为正数，当前为: {self.epsilon}")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")


_DEFAULT_CONFIGS = {
    ConfigType.DECK: DeckConfig,
    ConfigType.SAMPLING: SamplingConfig,
    ConfigType.LOGGING: LoggingConfig,
}


class ConfigService:
    """配置管理服务

    控制台日志处理器在所有实例间共享，carddeck日志器上至多安装一个.
    """

    _console_handler: Optional[logging.Handler] = None

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'reproducible': DeckConfig(seed=42),
        }

        self._configs[ConfigType.SAMPLING] = {
            'default': SamplingConfig(),
            'strict': SamplingConfig(
                epsilon=0.0005,
                timeout_seconds=10.0,
                max_trials=2_000_000
            ),
            'quick': SamplingConfig(
                max_trials=20_000,
                timeout_seconds=0.5,
                epsilon=0.01
            ),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'production': LoggingConfig(
                log_level='WARNING',
                enable_console_logging=False
            ),
        }

        self.logger.debug("默认配置加载完成")

    def _get_config(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置文件名 (default, reproducible)

        Returns:
            查询结果，包含牌组配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.DECK, profile))

    def get_sampling_config(self, profile: str = "default") -> QueryResult[SamplingConfig]:
        """
        获取统计抽样配置

        Args:
            profile: 配置文件名 (default, strict, quick)

        Returns:
            查询结果，包含抽样配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.SAMPLING, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, production)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.LOGGING, profile))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        更新后的配置会重新校验，校验失败时原配置保持不变。

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known_fields = {f.name for f in dataclasses.fields(current_config)}
        unknown = sorted(set(updates) - known_fields)
        if unknown:
            return QueryResult.validation_error(
                f"配置项 {', '.join(unknown)} 不存在于 {config_type.value}.{profile} 中",
                error_code="CONFIG_FIELD_NOT_FOUND"
            )

        try:
            config_profiles[profile] = dataclasses.replace(current_config, **updates)
        except (TypeError, ValueError) as e:
            return QueryResult.validation_error(
                f"配置值无效: {e}",
                error_code="CONFIG_VALUE_INVALID"
            )

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def add_profile(self, config_type: ConfigType, profile: str, **values: Any) -> QueryResult[bool]:
        """
        新增配置文件

        Args:
            config_type: 配置类型
            profile: 新配置文件名
            **values: 配置项，未给出的使用默认值

        Returns:
            查询结果，包含新增是否成功
        """
        if profile in self._configs[config_type]:
            return QueryResult.failure_result(
                f"配置文件 {profile} 已存在",
                error_code="CONFIG_PROFILE_EXISTS"
            )

        try:
            config = _DEFAULT_CONFIGS[config_type](**values)
        except (TypeError, ValueError) as e:
            return QueryResult.validation_error(
                f"配置值无效: {e}",
                error_code="CONFIG_VALUE_INVALID"
            )

        self._configs[config_type][profile] = config
        self.logger.info(f"新增配置 {config_type.value}.{profile}")
        return QueryResult.success_result(True)

    def create_deck(self, profile: str = "default") -> Deck:
        """
        按牌组配置创建一副新牌

        Args:
            profile: 牌组配置文件名

        Returns:
            Deck: 已洗好的新牌组；配置了seed时洗牌结果可重现
        """
        config = self._get_config(ConfigType.DECK, profile)
        if config.seed is None:
            return Deck()
        return Deck(random.Random(config.seed))

    def setup_logging(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        按日志配置设置carddeck包的日志

        重复调用或多个服务实例调用时只替换已安装的处理器，不会重复输出。

        Args:
            profile: 日志配置文件名

        Returns:
            查询结果，包含生效的日志配置
        """
        config = self._get_config(ConfigType.LOGGING, profile)
        package_logger = logging.getLogger("carddeck")
        package_logger.setLevel(config.log_level)

        if ConfigService._console_handler is not None:
            package_logger.removeHandler(ConfigService._console_handler)
            ConfigService._console_handler = None

        if config.enable_console_logging:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(config.log_format))
            package_logger.addHandler(handler)
            ConfigService._console_handler = handler

        return QueryResult.success_result(config, message=f"日志级别: {config.log_level}")
