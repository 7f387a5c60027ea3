import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stdout handler on the root logger unless one already exists."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("shlist_import").setLevel(level.upper())
    # httpx logs every request at INFO, including the Anthropic URL
    logging.getLogger("httpx").setLevel(logging.WARNING)
