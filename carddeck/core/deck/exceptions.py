"""
牌组业务异常定义.

所有异常都直接向调用方抛出，不做重试.
"""

from typing import Optional


DECK_EXHAUSTED_MESSAGE = "Not enough remaining cards in the deck"


class CardDeckError(Exception):
    """牌组基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidOperationError(CardDeckError):
    """当前状态下不允许的操作"""
    pass


class DeckExhaustedError(InvalidOperationError):
    """牌组已空，无法继续发牌"""

    def __init__(self, message: str = DECK_EXHAUSTED_MESSAGE):
        super().__init__(message, error_code="DECK_EXHAUSTED")
