from dataclasses import dataclass, field


@dataclass
class InterfaceCounters:
    interface: str = ""
    bytes_sent: int = 0
    bytes_recv: int = 0


@dataclass
class CounterSnapshot:
    bytes_sent: int = 0
    bytes_received: int = 0


@dataclass
class CpuSnapshot:
    per_core: list[float] = field(default_factory=list)


@dataclass
class MemorySnapshot:
    total: int = 0
    used: int = 0
    swap_total: int = 0
    swap_used: int = 0
