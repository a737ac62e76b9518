"""slingrace/debug.py — Debug flag from environment variable."""

import os

DEBUG = os.environ.get("SLINGRACE_DEBUG", "") == "1"
