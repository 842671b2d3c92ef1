# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from flask import Flask

from identity_service.shared.config import SecurityConfig
from identity_service.shared.errors import RateLimitedError
from identity_service.shared.logging import logger
from identity_service.shared.utils import client_ip


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
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
        self._lock = Lock()
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))
        self._last_sweep = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep > self._window:
                self._sweep(now)
            bucket = self._buckets[key]
            # Drop old
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True

    def _sweep(self, now: float) -> None:
        # Caller holds self._lock.
        stale = [
            key
            for key, bucket in self._buckets.items()
            if not bucket.timestamps or (now - bucket.timestamps[-1]) > self._window
        ]
        for key in stale:
            del self._buckets[key]
        self._last_sweep = now


def configure_rate_limit(app: Flask, security: SecurityConfig) -> InMemoryRateLimiter | None:
    if not security.enable_rate_limit:
        return None

    limiter = InMemoryRateLimiter(security.rate_limit_requests, security.rate_limit_window)

    @app.before_request
    def _rate_limit() -> None:
        key = client_ip()
        if not limiter.allow(key):
            logger.warning(f"rate_limit: rejected client={key}")
            raise RateLimitedError()

    return limiter


__all__ = ["InMemoryRateLimiter", "configure_rate_limit"]
