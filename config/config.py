import os
from pathlib import Path


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "paycheck-pal-dev"

    # JSON storage
    DATA_DIR = os.environ.get("DATA_DIR") or str(Path.cwd() / "data")
    RECORDS_FILENAME = os.environ.get("RECORDS_FILENAME", "work_records.json")
    SETTINGS_FILENAME = os.environ.get("SETTINGS_FILENAME", "pay_settings.json")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def storage_config(data_dir: str) -> dict:
    return {
        "data_dir": data_dir,
        "records_filename": Config.RECORDS_FILENAME,
        "settings_filename": Config.SETTINGS_FILENAME,
    }
