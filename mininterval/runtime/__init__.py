"""
Runtime package for time keeping.

Provides the clock abstraction the runner uses to read the time and to wait
out the remainder of an interval.
"""

from .clock import Clock, MonotonicClock, sleep

__all__ = ["Clock", "MonotonicClock", "sleep"]
