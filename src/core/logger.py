import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    global _configured
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    _configured = True
