# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
import logging


# Shared logger for every component; configs default to it
global_logger = logging.getLogger("MDTranslateLogger")
global_logger.setLevel(logging.DEBUG)
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
global_logger.addHandler(console_handler)
