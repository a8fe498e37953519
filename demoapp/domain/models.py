"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the point-in-time process
snapshot rendered by the stats page.
"""

from dataclasses import dataclass

BYTES_PER_MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class MemoryUsage:
    """Memory counters for the current process, in bytes.

    Attributes:
        rss_bytes: Resident set size.
        vms_bytes: Virtual memory size reserved by the process.
        private_bytes: Resident memory not shared with other processes.
        shared_bytes: Resident memory shared with other processes.
    """

    rss_bytes: int
    vms_bytes: int
    private_bytes: int
    shared_bytes: int


@dataclass(frozen=True)
class EnvironmentReport:
    """Deployment-related environment variables as seen by the process.

    Attributes:
        display_value: `DISPLAY_VALUE` or the not-set sentinel.
        port: `PORT` or the default port.
        namespace: `KUBERNETES_NAMESPACE` or the not-set sentinel.
        pod_name: `HOSTNAME` or the not-set sentinel.
        node_name: `NODE_NAME` or the not-set sentinel.
        pod_ip: `POD_IP` or the not-set sentinel.
    """

    display_value: str
    port: str
    namespace: str
    pod_name: str
    node_name: str
    pod_ip: str


@dataclass(frozen=True)
class StatsSnapshot:
    """Point-in-time process and environment snapshot for one request.

    Attributes:
        hostname: Host name reported by the operating system.
        platform: Operating system platform identifier.
        architecture: CPU architecture identifier.
        runtime_version: Python interpreter version.
        uptime_seconds: Whole seconds since the process started.
        memory: Process memory counters.
        environment: Deployment environment variables.
    """

    hostname: str
    platform: str
    architecture: str
    runtime_version: str
    uptime_seconds: int
    memory: MemoryUsage
    environment: EnvironmentReport


def domain_format_megabytes(byte_count: int) -> str:
    """Render a byte count as megabytes with two decimals.

    Args:
        byte_count: Raw byte count.

    Returns:
        str: Display string such as `50.00 MB`.
    """

    return f"{byte_count / BYTES_PER_MEGABYTE:.2f} MB"
