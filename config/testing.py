import os
import tempfile

from config.config import storage_config

SECRET_KEY = "test-secret"

STORAGE_CONFIG = storage_config(os.getenv("DATA_DIR") or tempfile.mkdtemp(prefix="paycheck-pal-test-"))

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
