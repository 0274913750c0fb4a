# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0


class MDTranslateError(Exception):
    """Base class for every error raised by mdtranslate."""


class UnsupportedConstructError(MDTranslateError):
    """The document contains a block or inline kind the translator cannot re-emit."""

    def __init__(self, kind: str, category: str = "block", line: int | None = None):
        self.kind = kind
        self.category = category
        self.line = line
        message = f"Unknown {category} type: {kind}"
        if line is not None:
            message += f" (line {line})"
        super().__init__(message)


class ConfigurationError(MDTranslateError, ValueError):
    """A required setting (target language, credential) is missing."""


class TranslationTransportError(MDTranslateError):
    """The remote translation call failed or returned an unusable body."""

    def __init__(self, message, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
