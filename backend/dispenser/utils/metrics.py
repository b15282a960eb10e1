from prometheus_client import Counter, Histogram
from functools import wraps
import time

# Action Metrics
action_requests = Counter(
    'dispenser_action_requests_total',
    'Total number of action requests',
    ['method']
)

action_failures = Counter(
    'dispenser_action_failures_total',
    'Total number of failed action requests',
    ['method', 'reason']
)

transaction_build_duration = Histogram(
    'dispenser_transaction_build_seconds',
    'Time spent building a claim transaction'
)


def track_build_time(func):
    """Decorator to time transaction construction"""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            return await func(*args, **kwargs)
        finally:
            transaction_build_duration.observe(time.time() - start_time)
    return wrapper
