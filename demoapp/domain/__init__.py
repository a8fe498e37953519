"""Domain models used across application layer boundaries."""

from .deployment import (
    CONTAINER_BASE_IMAGE,
    CONTAINER_RUNTIME_USER,
    DEPLOYMENT_STACK_TABLE,
    INFRASTRUCTURE_TABLE,
    POD_REPLICAS_NOTE,
    REQUEST_FLOW_STEPS,
    SECURITY_POSTURE_TABLE,
    DescriptionRow,
    DescriptionTable,
)
from .models import BYTES_PER_MEGABYTE, EnvironmentReport, MemoryUsage, StatsSnapshot, domain_format_megabytes

__all__ = [
    "BYTES_PER_MEGABYTE",
    "CONTAINER_BASE_IMAGE",
    "CONTAINER_RUNTIME_USER",
    "DEPLOYMENT_STACK_TABLE",
    "INFRASTRUCTURE_TABLE",
    "POD_REPLICAS_NOTE",
    "REQUEST_FLOW_STEPS",
    "SECURITY_POSTURE_TABLE",
    "DescriptionRow",
    "DescriptionTable",
    "EnvironmentReport",
    "MemoryUsage",
    "StatsSnapshot",
    "domain_format_megabytes",
]
