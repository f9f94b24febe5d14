# catalog/main.py
import uvicorn

from catalog.api import create_app
from catalog.utils.settings import APP_HOST, APP_PORT
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

try:
    app = create_app()
    logger.info("Catalog service initialized")
except Exception as e:
    logger.error(f"Failed to initialize catalog service: {e}")
    raise


if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
