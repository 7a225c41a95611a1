import logging

import uvicorn

from .app import app
from .core.config import Config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def resolve_log_level(level_name: str) -> int:
    """Map a LOG_LEVEL name to a logging level; unknown names mean WARNING."""
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level_name: str = Config.LOG_LEVEL) -> None:
    """Route app and uvicorn logs through one stream handler."""
    level = resolve_log_level(level_name)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()], force=True)
    logging.getLogger("todolists").setLevel(level)


def run() -> None:
    configure_logging()
    Config.validate()
    logger.warning(f"Starting todo lists on {Config.HOST}:{Config.PORT} ({Config.ENVIRONMENT})")
    uvicorn.run(app, host=Config.HOST, port=Config.PORT, log_config=None)


if __name__ == "__main__":
    run()
