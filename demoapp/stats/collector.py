"""Process stats collection backed by psutil and the process environment."""

from __future__ import annotations

import logging
import os
import platform
import socket
import sys
import time
from typing import Mapping

import psutil

from demoapp.domain import EnvironmentReport, MemoryUsage, StatsSnapshot

from .interfaces import StatsCollectorPort

logger = logging.getLogger(__name__)

NOT_SET = "not set"
DEFAULT_PORT_TEXT = "3000"


def _stats_lookup(environ: Mapping[str, str], name: str, fallback: str) -> str:
    value = environ.get(name)
    if not value:
        return fallback
    return value


def stats_read_environment(environ: Mapping[str, str]) -> EnvironmentReport:
    """Read the deployment environment variables with per-variable fallbacks.

    Absent and empty variables are treated the same way.

    Args:
        environ: Environment mapping to read from.

    Returns:
        EnvironmentReport: Resolved environment values.
    """

    return EnvironmentReport(
        display_value=_stats_lookup(environ, "DISPLAY_VALUE", NOT_SET),
        port=_stats_lookup(environ, "PORT", DEFAULT_PORT_TEXT),
        namespace=_stats_lookup(environ, "KUBERNETES_NAMESPACE", NOT_SET),
        pod_name=_stats_lookup(environ, "HOSTNAME", NOT_SET),
        node_name=_stats_lookup(environ, "NODE_NAME", NOT_SET),
        pod_ip=_stats_lookup(environ, "POD_IP", NOT_SET),
    )


def stats_read_memory(process: psutil.Process) -> MemoryUsage:
    """Read memory counters for one process.

    Args:
        process: psutil process handle.

    Returns:
        MemoryUsage: Memory counters in bytes. Shared memory is 0 on
        platforms where psutil does not report it.
    """

    memory_info = process.memory_info()
    shared_bytes = int(getattr(memory_info, "shared", 0))
    rss_bytes = int(memory_info.rss)
    return MemoryUsage(
        rss_bytes=rss_bytes,
        vms_bytes=int(memory_info.vms),
        private_bytes=max(rss_bytes - shared_bytes, 0),
        shared_bytes=shared_bytes,
    )


class ProcessStatsCollector(StatsCollectorPort):
    """Stats collector reading the current process through psutil."""

    def __init__(self, environ: Mapping[str, str] | None = None, process: psutil.Process | None = None):
        """Initialize the collector.

        Args:
            environ: Environment mapping; defaults to `os.environ`, read on every call.
            process: Process to inspect; defaults to the current process.
        """

        self._environ = os.environ if environ is None else environ
        self._process = psutil.Process() if process is None else process

    def stats_uptime_seconds(self) -> int:
        """Return whole seconds elapsed since the inspected process started."""

        elapsed_seconds = time.time() - self._process.create_time()
        return max(int(elapsed_seconds), 0)

    def stats_collect_snapshot(self) -> StatsSnapshot:
        """Collect a fresh snapshot of the inspected process.

        Returns:
            StatsSnapshot: Snapshot built from live process and environment state.

        Raises:
            psutil.Error: Raised when the process can no longer be inspected.
        """

        snapshot = StatsSnapshot(
            hostname=socket.gethostname(),
            platform=sys.platform,
            architecture=platform.machine(),
            runtime_version=platform.python_version(),
            uptime_seconds=self.stats_uptime_seconds(),
            memory=stats_read_memory(self._process),
            environment=stats_read_environment(self._environ),
        )
        logger.debug("Collected stats snapshot for pid=%s rss=%s", self._process.pid, snapshot.memory.rss_bytes)
        return snapshot
