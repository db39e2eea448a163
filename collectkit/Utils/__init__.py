from .Logger import LaravelStyleLogger, LogContext, get_logger

__all__ = [
    "LaravelStyleLogger",
    "LogContext",
    "get_logger",
]
