"""
Start the MusicVibe API server.

Configures logging, prepares the database (seeding the sample catalog on
first start when enabled) and serves the FastAPI app with uvicorn.
"""

import logging

import uvicorn

from config.config import get_config
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    config = get_config()
    setup_logging(config)

    # Imported after logging is configured so module-level setup is logged
    from api import app, get_db
    from services.musicvibe_db.sample_data import seed_sample_data

    db = get_db()
    if config.seed_sample_data:
        seed_sample_data(db)

    logger.info(f"Starting MusicVibe API server on {config.api_host}:{config.api_port}...")
    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
        reload=False
    )


if __name__ == '__main__':
    main()
