# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from mdtranslate.cli import main

if __name__ == "__main__":
    main()
