"""Utilities for calling external APIs."""

from .rate_limiter import RateLimiter, RateLimitConfig, SingleFlight

__all__ = [
    "RateLimiter",
    "RateLimitConfig",
    "SingleFlight",
]
