import importlib
import logging
from typing import Protocol

from dacite import Config, from_dict

from statusprobe.data.telemetry import (
    CounterSnapshot,
    CpuSnapshot,
    InterfaceCounters,
    MemorySnapshot,
)

COUNTER_MODULUS = 2**64
IGNORED_INTERFACE_PREFIXES = ("lo", "docker", "bridge")

logger = logging.getLogger(__name__)


class TelemetryError(Exception):
    pass


class UnsupportedPlatformError(TelemetryError):
    pass


class TelemetryProvider(Protocol):
    def snapshot_network(self) -> CounterSnapshot: ...

    def snapshot_cpu(self) -> CpuSnapshot: ...

    def snapshot_memory(self) -> MemorySnapshot: ...


def is_counted_interface(name: str) -> bool:
    """
    Loopback, docker and bridge interfaces never count toward throughput.
    """
    return not name.startswith(IGNORED_INTERFACE_PREFIXES)


def sum_counters(interfaces: list[InterfaceCounters]) -> CounterSnapshot:
    counted = [item for item in interfaces if is_counted_interface(item.interface)]
    return CounterSnapshot(
        bytes_sent=sum(item.bytes_sent for item in counted) % COUNTER_MODULUS,
        bytes_received=sum(item.bytes_recv for item in counted) % COUNTER_MODULUS,
    )


def load_psutil():
    """
    Import psutil, which refuses to import at all on platforms it does not support.
    """
    try:
        return importlib.import_module("psutil")
    except NotImplementedError as e:
        raise UnsupportedPlatformError("This OS is not supported!") from e


class PsutilTelemetry:
    """
    Telemetry provider backed by psutil. Every call reads the current counters.
    """

    def __init__(self):
        self.psutil = load_psutil()

    def snapshot_network(self) -> CounterSnapshot:
        interfaces: list[InterfaceCounters] = []
        for name, counters in self.psutil.net_io_counters(pernic=True).items():
            interfaces.append(
                from_dict(
                    data_class=InterfaceCounters,
                    data={"interface": name, **counters._asdict()},
                    config=Config(cast=[int]),
                )
            )
        snapshot = sum_counters(interfaces)
        logger.debug(
            f"{len(interfaces)} interfaces, sent={snapshot.bytes_sent} received={snapshot.bytes_received}"
        )
        return snapshot

    def snapshot_cpu(self) -> CpuSnapshot:
        # psutil measures busy time since the previous call in this process
        return CpuSnapshot(per_core=self.psutil.cpu_percent(interval=None, percpu=True))

    def snapshot_memory(self) -> MemorySnapshot:
        memory = self.psutil.virtual_memory()
        swap = self.psutil.swap_memory()
        return from_dict(
            data_class=MemorySnapshot,
            data={
                "total": memory.total,
                "used": memory.used,
                "swap_total": swap.total,
                "swap_used": swap.used,
            },
            config=Config(cast=[int]),
        )
