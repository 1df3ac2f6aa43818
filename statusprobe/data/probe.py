from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class MetricKind(Enum):
    NETWORK = "net"
    CPU = "cpu"
    MEMORY = "mem"


@dataclass(frozen=True)
class ProbeConfig:
    show_icons: bool = False
    sample_interval: timedelta = timedelta(seconds=1)
    fixed_width: bool = True


@dataclass
class MetricFragment:
    order_index: int = 0
    text: str = ""
