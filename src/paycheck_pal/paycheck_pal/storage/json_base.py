from __future__ import annotations

import json
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator


@contextmanager
def atomic_writer(path: Path) -> Iterator[IO[str]]:
    """Write to a temp file next to `path`, then swap it into place.

    Readers see either the old complete file or the new one. On error the
    temp file is removed and the original is left untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            yield fh
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def write_json(path: Path, payload: Any) -> None:
    with atomic_writer(path) as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)


def read_json(path: Path) -> Any:
    """Load a JSON document; raises FileNotFoundError / ValueError to the caller."""
    with Path(path).open("r", encoding="utf-8") as fh:
        return json.load(fh)
