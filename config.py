"""
Centralized configuration for the Fury FM maintenance tools.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Realtime database endpoint, e.g. https://fury-fm-default-rtdb.firebaseio.com
FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")
# Service account key file (JSON); access tokens are minted from it with google-auth
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")
# Legacy database secret or Firebase ID token, sent as the `auth` query parameter.
# Ignored when FIREBASE_CREDENTIALS is set.
FIREBASE_AUTH_TOKEN = os.getenv("FIREBASE_AUTH_TOKEN")

STORE_TIMEOUT_SECONDS = _parse_float("STORE_TIMEOUT_SECONDS", 10.0)

# Max in-flight manager updates during a sweep (1 = one manager at a time)
MAINTENANCE_CONCURRENCY = max(1, _parse_int("MAINTENANCE_CONCURRENCY", 1))

DEFAULT_TARGET_BUDGET = _parse_int("DEFAULT_TARGET_BUDGET", 900_000_000)  # 900M

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
