"""
Process entrypoint: config -> logging -> server.
"""

import sys

from .config import DEFAULT_ENV_FILE, load_config
from .database import create_db_engine
from .logging_config import setup_logger
from .server import ServerStartupError, start


def main(env_file: str = DEFAULT_ENV_FILE) -> int:
    cfg = load_config(env_file)

    try:
        logger = setup_logger(cfg.log_level)
    except ValueError as e:
        print(f"can't initialize logger: {e}", file=sys.stderr)
        return 1

    logger.info(f"Starting GovInfo API on port {cfg.port}")
    for key, raw in cfg.ignored_settings:
        logger.warning(f"Ignoring non-integer {key}={raw!r}, using default")
    if not cfg.twilio_configured:
        logger.warning("TWILIO_SID/TWILIO_TOKEN not set")

    engine = create_db_engine(cfg)
    try:
        start(cfg, logger, engine)
    except ServerStartupError as e:
        logger.critical(f"Server failed: {e}")
        return 1
    finally:
        if engine is not None:
            engine.dispose()

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
