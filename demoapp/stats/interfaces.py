"""Typed interfaces for process stats collection."""

from typing import Protocol

from demoapp.domain import StatsSnapshot


class StatsCollectorPort(Protocol):
    """Port definition for point-in-time process and environment snapshots."""

    def stats_collect_snapshot(self) -> StatsSnapshot:
        """Collect a fresh snapshot of the running process.

        Returns:
            StatsSnapshot: Snapshot built from live process and environment state.

        Raises:
            RuntimeError: Raised when process state cannot be queried.
        """
