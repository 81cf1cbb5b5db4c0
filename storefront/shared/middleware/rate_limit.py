# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from flask import Request, current_app, jsonify, request

from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import logger

CONFIG_EXTENSION = "storefront.config"


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    """Sliding-window limiter keyed by client.

    Keys whose window has fully elapsed are pruned at most once per window,
    so the map only holds clients seen recently.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))
        self._last_prune = clock()
        self._lock = threading.Lock()

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _prune(self, now: float) -> None:
        stale = [
            key
            for key, bucket in self._buckets.items()
            if not bucket.timestamps or (now - bucket.timestamps[-1]) > self._window
        ]
        for key in stale:
            del self._buckets[key]
        self._last_prune = now

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            if now - self._last_prune > self._window:
                self._prune(now)
            bucket = self._buckets[key]
            # Drop old
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def _active_config() -> AppConfig:
    config = current_app.extensions.get(CONFIG_EXTENSION)
    if config is None:
        # Bare Flask apps outside create_app fall back to the environment.
        return load_config()
    return config


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    def decorator(f: Callable):
        limiter: InMemoryRateLimiter | None = None
        init_lock = threading.Lock()

        @wraps(f)
        def wrapper(*args, **kwargs):
            nonlocal limiter
            config = _active_config()
            if not config.security.enable_rate_limit:
                return f(*args, **kwargs)
            with init_lock:
                if limiter is None:
                    limiter = InMemoryRateLimiter(
                        limit or config.security.rate_limit_requests,
                        window_seconds or config.security.rate_limit_window,
                    )
            key = f"{request.path}:{_client_key(request)}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                return jsonify({"error": "rate_limited"}), 429
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["CONFIG_EXTENSION", "InMemoryRateLimiter", "rate_limit"]
