import os

from config.config import Config, storage_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_CONFIG = storage_config(Config.DATA_DIR)

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
