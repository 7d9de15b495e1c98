import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.getenv("TRACKER_DATA_DIR", os.path.join(APP_DIR, "data"))
DB_PATH = os.getenv("TRACKER_DB_PATH", os.path.join(DATA_DIR, "tracker.db"))
PLAN_PATH = os.getenv("TRACKER_PLAN_PATH", os.path.join(DATA_DIR, "app_data.json"))
LOG_LEVEL = os.getenv("TRACKER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


def setup_logging(level=None):
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
