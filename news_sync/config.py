from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_TIMEOUT_SEC = 15.0


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class NetworkOptions:
    base_url: Optional[str] = None
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    debug: bool = False  # log every request/response at DEBUG
    headers: Optional[Mapping[str, str]] = None

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "NetworkOptions":
        """
        Build options from NEWS_SYNC_* environment variables.

        A ``.env`` file is loaded first unless ``dotenv`` is False; variables
        already set in the environment win.
        """
        if dotenv:
            load_dotenv()
        timeout = os.getenv("NEWS_SYNC_TIMEOUT")
        return cls(
            base_url=os.getenv("NEWS_SYNC_BASE_URL") or None,
            timeout_sec=float(timeout) if timeout else DEFAULT_TIMEOUT_SEC,
            debug=_env_flag("NEWS_SYNC_DEBUG"),
        )
