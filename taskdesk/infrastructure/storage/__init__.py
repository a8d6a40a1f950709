# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .document_store import JsonDocumentStore
from .records import MalformedRecordError

__all__ = ["JsonDocumentStore", "MalformedRecordError"]
