import dataclasses
import logging
import threading
from typing import Callable

from statusprobe import render
from statusprobe.data.probe import MetricFragment, MetricKind, ProbeConfig
from statusprobe.telemetry import TelemetryProvider

Renderer = Callable[[ProbeConfig, TelemetryProvider], str]

RENDERERS: dict[MetricKind, Renderer] = {
    MetricKind.NETWORK: render.render_network,
    MetricKind.CPU: render.render_cpu,
    MetricKind.MEMORY: render.render_memory,
}

logger = logging.getLogger(__name__)


class RendererThread(threading.Thread):
    """
    Run one renderer and keep either its fragment or the exception it raised.
    """

    def __init__(
        self,
        order_index: int,
        renderer: Renderer,
        config: ProbeConfig,
        provider: TelemetryProvider,
    ):
        super().__init__(name=f"renderer-{order_index}", daemon=True)
        self.order_index = order_index
        self.renderer = renderer
        self.config = config
        self.provider = provider
        self.fragment: MetricFragment | None = None
        self.error: Exception | None = None

    def run(self):
        try:
            text = self.renderer(self.config, self.provider)
            self.fragment = MetricFragment(order_index=self.order_index, text=text)
        except Exception as e:
            self.error = e


def run_metrics(
    kinds: list[MetricKind], config: ProbeConfig, provider: TelemetryProvider
) -> str:
    """
    Render every requested metric on its own thread and join the fragments
    in the order they were requested.
    """
    threads: list[RendererThread] = []
    for i, kind in enumerate(kinds):
        thread = RendererThread(
            order_index=i,
            renderer=RENDERERS[kind],
            config=dataclasses.replace(config),
            provider=provider,
        )
        threads.append(thread)
        logger.debug(f"starting {kind.name} as {thread.name}")
        thread.start()

    for thread in threads:
        thread.join()

    fragments: list[MetricFragment] = []
    for thread in threads:
        if thread.error is not None:
            logger.error(f"{thread.name} failed: {thread.error!r}")
            raise thread.error
        if thread.fragment is None:
            raise RuntimeError(f"{thread.name} finished without a fragment")
        fragments.append(thread.fragment)

    fragments.sort(key=lambda fragment: fragment.order_index)
    return " ".join(fragment.text for fragment in fragments)
