# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
__version__ = "0.1.0"

from mdtranslate.errors import (
    ConfigurationError,
    MDTranslateError,
    TranslationTransportError,
    UnsupportedConstructError,
)
from mdtranslate.translator.md_translator import MDTranslator, MDTranslatorConfig
from mdtranslate.workflow.md_workflow import MarkdownWorkflow, MarkdownWorkflowConfig

__all__ = [
    "__version__",
    "ConfigurationError",
    "MDTranslateError",
    "TranslationTransportError",
    "UnsupportedConstructError",
    "MDTranslator",
    "MDTranslatorConfig",
    "MarkdownWorkflow",
    "MarkdownWorkflowConfig",
]
