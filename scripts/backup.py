"""Backup the stored work records.

Note: Copies the JSON records file into `backups/` with a timestamp. The copy
goes through the same atomic writer as the app, so a half-written backup is
never left behind.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.paycheck_pal.paycheck_pal.storage.config import StorageConfig
from src.paycheck_pal.paycheck_pal.storage.json_base import atomic_writer


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = StorageConfig.from_mapping(settings.STORAGE_CONFIG)

    source = storage.records_path
    if not source.exists():
        raise SystemExit(f"Nothing to back up: {source} does not exist")

    out_dir = REPO_ROOT / "backups"
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{source.stem}_{ts}{source.suffix}"

    with atomic_writer(out_file) as fh:
        fh.write(source.read_text(encoding="utf-8"))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
