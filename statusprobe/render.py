import logging
from time import sleep

from statusprobe import glyphs
from statusprobe.data.probe import ProbeConfig
from statusprobe.sampler import sample_rate
from statusprobe.telemetry import TelemetryError, TelemetryProvider
from statusprobe.util import conversion

NETWORK_WIDTH = 6
MEMORY_WIDTH = 6
CPU_WIDTH = 4

logger = logging.getLogger(__name__)


def _label(config: ProbeConfig, icon: str, text: str) -> str:
    return f"{icon}{glyphs.icon_spacer}" if config.show_icons else text


def render_network(config: ProbeConfig, provider: TelemetryProvider) -> str:
    up, down = sample_rate(provider, config.sample_interval)
    logger.debug(f"up={up} down={down}")

    width = NETWORK_WIDTH
    up_label = _label(config, glyphs.cod_arrow_small_up, "UP: ")
    down_label = _label(config, glyphs.cod_arrow_small_down, "DOWN: ")
    up_str = conversion.format_bytes(up, config.fixed_width, width)
    down_str = conversion.format_bytes(down, config.fixed_width, width)

    return f"{up_label}{up_str:>{width}}/s {down_label}{down_str:>{width}}/s"


def render_cpu(config: ProbeConfig, provider: TelemetryProvider) -> str:
    # The first read only primes the provider, usage is taken after the wait
    provider.snapshot_cpu()
    sleep(config.sample_interval.total_seconds())
    snapshot = provider.snapshot_cpu()

    if len(snapshot.per_core) == 0:
        raise TelemetryError("no CPU cores reported")

    average = sum(snapshot.per_core) / len(snapshot.per_core)
    logger.debug(f"{len(snapshot.per_core)} cores, average={average}")

    width = CPU_WIDTH
    label = _label(config, glyphs.oct_cpu, "CPU: ")
    value = conversion.format_percent(average, width)

    return f"{label}{value:>{width}}"


def render_memory(config: ProbeConfig, provider: TelemetryProvider) -> str:
    snapshot = provider.snapshot_memory()

    width = MEMORY_WIDTH
    memory_label = _label(config, glyphs.md_memory, "MEM: ")
    swap_label = _label(config, glyphs.cod_arrow_swap, "SWP: ")
    used, total, swap_used, swap_total = (
        conversion.format_bytes(number, config.fixed_width, width)
        for number in (
            snapshot.used,
            snapshot.total,
            snapshot.swap_used,
            snapshot.swap_total,
        )
    )

    return (
        f"{memory_label}{used:>{width}}/{total:>{width}} "
        f"{swap_label}{swap_used:>{width}}/{swap_total:>{width}}"
    )
