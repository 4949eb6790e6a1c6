# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Steam OpenID gateway application package."""

__version__ = "0.1.0"
