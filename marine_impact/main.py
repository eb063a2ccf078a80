"""API server entry point.

Configures logging, then serves marine_impact.api:app with uvicorn on the
host and port from ApiServerConfig (API_ prefix).
"""

import json
import logging
import logging.config
import os
from pathlib import Path

import uvicorn

from marine_impact.config import ApiServerConfig

REPO_ROOT = Path(__file__).parent.parent


def is_running_in_container() -> bool:
    """Detect if running in an ECS container.

    ECS injects metadata URI environment variables into containers. These are
    never present locally.
    """
    return bool(
        os.environ.get("ECS_CONTAINER_METADATA_URI_V4")
        or os.environ.get("ECS_CONTAINER_METADATA_URI")
    )


def logging_config_path(config: ApiServerConfig) -> Path:
    """Pick the dictConfig file: explicit API_LOG_CONFIG, else JSON in containers."""
    if config.log_config:
        return Path(config.log_config)
    config_file = "logging.json" if is_running_in_container() else "logging-dev.json"
    return REPO_ROOT / config_file


def configure_logging(config: ApiServerConfig) -> None:
    """Configure logging from a dictConfig JSON file.

    Falls back to basicConfig at the configured level when the file is missing.
    """
    config_path = logging_config_path(config)

    if config_path.exists():
        with open(config_path) as f:
            logging.config.dictConfig(json.load(f))
        logging.getLogger().setLevel(config.log_level.upper())
    else:
        logging.basicConfig(
            level=config.log_level.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logging.getLogger(__name__).warning(
            f"Logging config {config_path} not found, using basic config"
        )


logger = logging.getLogger(__name__)


def main():
    """Serve the assessment API with uvicorn."""
    config = ApiServerConfig()
    configure_logging(config)

    logger.info(f"Starting assessment API on {config.host}:{config.port}")
    uvicorn.run(
        "marine_impact.api:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
