# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0

default_params = {
    "from_lang": None,  # let the service detect the source language
    "to_lang": "en",
    "timeout": 30,
}
