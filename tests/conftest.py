"""Shared fixtures: a scripted telemetry provider and a sleep that does not block."""

from __future__ import annotations

import sys
import threading

import pytest

from statusprobe import render, sampler
from statusprobe.data.telemetry import CounterSnapshot, CpuSnapshot, MemorySnapshot


class FakeTelemetry:
    """Returns scripted snapshots in order, repeating the last one when exhausted."""

    def __init__(
        self,
        network: list[CounterSnapshot] | None = None,
        cpu: list[CpuSnapshot] | None = None,
        memory: MemorySnapshot | None = None,
    ) -> None:
        self.network = list(network or [CounterSnapshot(), CounterSnapshot()])
        self.cpu = list(cpu or [CpuSnapshot([0.0]), CpuSnapshot([0.0])])
        self.memory = memory or MemorySnapshot()
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def _next(self, name: str, items: list):
        with self._lock:
            self.calls.append(name)
            return items.pop(0) if len(items) > 1 else items[0]

    def snapshot_network(self) -> CounterSnapshot:
        return self._next("network", self.network)

    def snapshot_cpu(self) -> CpuSnapshot:
        return self._next("cpu", self.cpu)

    def snapshot_memory(self) -> MemorySnapshot:
        with self._lock:
            self.calls.append("memory")
        return self.memory


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the interval waits with a recorder."""

    recorded: list[float] = []
    monkeypatch.setattr(sampler, "sleep", recorded.append)
    monkeypatch.setattr(render, "sleep", recorded.append)
    return recorded


@pytest.fixture(autouse=True)
def cache_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    return tmp_path / "cache"


class _UnsupportedPlatformFinder:
    """Fails the psutil import the way psutil does on an unknown platform."""

    def find_spec(self, name, path=None, target=None):
        if name == "psutil":
            raise NotImplementedError("platform plan9 is not supported")
        return None


@pytest.fixture
def psutil_unsupported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delitem(sys.modules, "psutil", raising=False)
    monkeypatch.setattr(sys, "meta_path", [_UnsupportedPlatformFinder(), *sys.meta_path])
