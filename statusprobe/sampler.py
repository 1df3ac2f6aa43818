import logging
from datetime import timedelta
from time import sleep

from statusprobe.telemetry import COUNTER_MODULUS, TelemetryProvider

logger = logging.getLogger(__name__)


def wrapping_sub(second: int, first: int) -> int:
    """
    Subtract two counter readings modulo the 64-bit counter width.
    A counter that wrapped between the readings still yields a small positive delta.
    """
    return (second - first) % COUNTER_MODULUS


def interval_seconds(interval: timedelta) -> int:
    return int(interval.total_seconds())


def sample_rate(provider: TelemetryProvider, interval: timedelta) -> tuple[int, int]:
    """
    Measure network throughput over `interval` and return (up, down) in bytes per second.
    """
    seconds = interval_seconds(interval)
    if seconds < 1:
        raise ValueError(f"sample interval must be at least 1 second, got {interval}")

    first = provider.snapshot_network()
    sleep(interval.total_seconds())
    second = provider.snapshot_network()

    sent = wrapping_sub(second.bytes_sent, first.bytes_sent)
    received = wrapping_sub(second.bytes_received, first.bytes_received)
    logger.debug(f"sent={sent} received={received} over {seconds}s")

    return sent // seconds, received // seconds
