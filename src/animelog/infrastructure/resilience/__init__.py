"""Resilience helpers for calls to the upstream catalog."""

from animelog.infrastructure.resilience.rate_limiter import RateLimiter
from animelog.infrastructure.resilience.retry import RetryPolicy

__all__ = ["RateLimiter", "RetryPolicy"]
