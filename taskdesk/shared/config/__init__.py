# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import INSECURE_SECRET_KEY, AppConfig, load_config

__all__ = ["AppConfig", "INSECURE_SECRET_KEY", "load_config"]
