# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

import os


MESSAGES = {
    "en": {
        "usage": "Usage: mdtranslate <source.md> <destination.md> [options]",
        "generated": "Generated: {path}",
        "file_not_found": "File not found: {path}",
        "config_error": "Configuration error: {error}",
        "unsupported_construct": "Cannot translate this document: {error}",
        "translate_failed": "Translation failed: {error}",
        "write_failed": "Cannot write {path}: {error}",
        "env_loaded": "Loaded {count} variable(s) from {path}",
    },
    "ja": {
        "usage": "使い方: mdtranslate <翻訳元.md> <翻訳先.md> [オプション]",
        "generated": "生成しました: {path}",
        "file_not_found": "ファイルが見つかりません: {path}",
        "config_error": "設定エラー: {error}",
        "unsupported_construct": "この文書は翻訳できません: {error}",
        "translate_failed": "翻訳に失敗しました: {error}",
        "write_failed": "{path} に書き込めません: {error}",
        "env_loaded": "{path} から {count} 個の変数を読み込みました",
    },
}


def t(key: str, *, lang: str | None = None, **kwargs) -> str:
    code = (lang or os.getenv("mdtranslate_LANG") or "en").lower()
    if code not in MESSAGES:
        code = "en"
    msg = MESSAGES[code].get(key) or MESSAGES["en"].get(key) or key
    try:
        return msg.format(**kwargs)
    except (KeyError, IndexError):
        return msg
