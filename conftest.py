from src.keyanalytics.utils import configure_logging

configure_logging(level="WARNING")
