from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .minifier import PreciseMinifierProtocol
from .render import RendererProtocol
from .walker import WalkerProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PreciseMinifierProtocol',
    'RendererProtocol',
    'WalkerProtocol',
]
