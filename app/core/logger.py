import logging
from app.core.config import settings

logger = logging.getLogger("planner")
logger.setLevel(settings.LOG_LEVEL)

# Module may be imported under reload; attach the console handler once
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)
