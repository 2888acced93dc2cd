from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .tools import ToolExecutorProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ToolExecutorProtocol',
]
