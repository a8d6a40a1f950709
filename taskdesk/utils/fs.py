# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any


def write_json_atomic(path: str | Path, obj: Any, *, indent: int = 2) -> None:
    """Serialize ``obj`` next to ``path`` and rename it into place.

    Readers see either the previous file or the new one, never a partial
    write. Serialization errors surface before the target is touched.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(obj, ensure_ascii=False, indent=indent) + "\n"

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, target)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def preserve_copy(src: Path, suffix: str = ".corrupt") -> Path:
    """Keep the current bytes of ``src`` under ``src`` + ``suffix``.

    Earlier copies are never replaced; a clash gets a numeric tail.
    """
    dst = src.with_name(src.name + suffix)
    n = 1
    while dst.exists():
        dst = src.with_name(f"{src.name}{suffix}.{n}")
        n += 1
    shutil.copy2(src, dst)
    return dst
