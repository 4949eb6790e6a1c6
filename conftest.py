# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Root conftest.py making the adapters importable without installing them."""

import sys
from pathlib import Path

_repo_root = Path(__file__).parent

for _adapter_dir in sorted((_repo_root / "adapters").glob("steamgate_*")):
    if str(_adapter_dir) not in sys.path:
        sys.path.insert(0, str(_adapter_dir))
