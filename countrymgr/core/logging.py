# countrymgr/core/logging.py
import logging
import sys
from pathlib import Path

from countrymgr.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Settings | None = None) -> None:
    """
    Configura el logger raíz. Los logs van a stderr para no mezclarse
    con el menú que se imprime en stdout.
    """
    config = config or default_settings

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.LOG_FILE:
        Path(config.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.LOG_FILE, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
