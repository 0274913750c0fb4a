# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

ENV_FILE_VARIABLE = "mdtranslate_ENV_FILE"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    # inline comments only count outside quotes
    return value.split(" #", 1)[0].rstrip()


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        values[key] = _unquote(value)
    return values


def resolve_env_file(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    hint = os.getenv(ENV_FILE_VARIABLE)
    return Path(hint) if hint else Path.cwd() / ".env"


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> tuple[Optional[str], list[str]]:
    """
    Load TRANSLATOR_KEY and friends from a .env file into os.environ.

    Without an explicit path, $mdtranslate_ENV_FILE is used, then ./.env.
    Variables already set in the environment are kept unless ``override``.

    Returns (path_used, loaded_keys); path_used is None when nothing was read.
    """
    candidate = resolve_env_file(path)
    if not candidate.is_file():
        return None, []
    try:
        content = candidate.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None, []

    loaded: list[str] = []
    for key, value in parse_env_lines(content.splitlines()).items():
        if override or key not in os.environ:
            os.environ[key] = value
            loaded.append(key)
    return str(candidate), loaded
