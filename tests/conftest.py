"""Shared test setup: keep log files out of the home directory."""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("NGN_LOG_DIR", tempfile.mkdtemp(prefix="ngn-logs-"))
