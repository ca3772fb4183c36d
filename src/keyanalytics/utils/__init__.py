from ._logging import configure_logging, get_logger, log_context

__all__ = [
    configure_logging.__name__,
    get_logger.__name__,
    log_context.__name__,
]
