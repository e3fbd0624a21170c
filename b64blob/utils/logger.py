import logging
import os

DEBUG = os.getenv("DEBUG", False)

logger = logging.getLogger("b64blob")
logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)
