"""Pytest configuration.

`faqbot` is laid out at the repository root and is not required to be installed for the tests.
Putting the root on `sys.path` lets `pytest` import `faqbot.*` straight from a checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
