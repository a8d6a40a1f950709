# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task management service: session auth over an embedded JSON document store."""

__version__ = "0.1.0"
