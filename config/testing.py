import os

from config.config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = {
    **Config.db_config(),
    "database": os.getenv("DB_NAME", "exam_attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
BATCH_MAX_WORKERS = 4

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
