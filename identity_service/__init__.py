# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-memory identity service: registration, login and bearer-token guarded user management."""

__version__ = "1.0.0"
