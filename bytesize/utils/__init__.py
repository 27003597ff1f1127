from .console import cnsl, log_level, set_logger

__all__ = ['cnsl', 'log_level', 'set_logger']
