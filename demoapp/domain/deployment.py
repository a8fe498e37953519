"""Static description of the reference deployment shown on the stats page.

None of these rows are introspected at runtime.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DescriptionRow:
    """One label/value row of a static description table."""

    label: str
    value: str


@dataclass(frozen=True)
class DescriptionTable:
    """Titled static table with its column headings."""

    title: str
    label_heading: str
    value_heading: str
    rows: tuple[DescriptionRow, ...]


INFRASTRUCTURE_TABLE = DescriptionTable(
    title="🏗️ Infrastructure",
    label_heading="Component",
    value_heading="Value",
    rows=(
        DescriptionRow("Cloud Provider", "AWS (us-west-2)"),
        DescriptionRow("Kubernetes Platform", "Amazon EKS"),
        DescriptionRow("Cluster Size", "2 nodes (t3.medium)"),
        DescriptionRow("Container Registry", "Amazon ECR"),
        DescriptionRow("Load Balancer", "AWS Network Load Balancer"),
        DescriptionRow("DNS", "Route53 (pulumidemo.t8rsk8s.io)"),
        DescriptionRow("SSL/TLS", "AWS Certificate Manager (ACM)"),
    ),
)

DEPLOYMENT_STACK_TABLE = DescriptionTable(
    title="🚀 Deployment Stack",
    label_heading="Layer",
    value_heading="Technology",
    rows=(
        DescriptionRow("IaC Tool", "Pulumi (Go SDK)"),
        DescriptionRow("Orchestration", "Kubernetes 1.x (EKS)"),
        DescriptionRow("Web Framework", "FastAPI on uvicorn"),
        DescriptionRow("Container Runtime", "containerd (via EKS)"),
        DescriptionRow("Networking", "AWS VPC CNI Plugin"),
    ),
)

SECURITY_POSTURE_TABLE = DescriptionTable(
    title="🔐 Security Posture",
    label_heading="Feature",
    value_heading="Status",
    rows=(
        DescriptionRow("Non-root Container", "✅ Running as UID 1001"),
        DescriptionRow("TLS/SSL", "✅ ACM Certificate"),
        DescriptionRow("Private Subnets", "✅ Pods in private subnets"),
        DescriptionRow("Registry", "✅ Private ECR repository"),
        DescriptionRow("DNS Validation", "✅ Route53 domain ownership"),
    ),
)

CONTAINER_BASE_IMAGE = "python:3.12-slim"
CONTAINER_RUNTIME_USER = "app (UID 1001)"
POD_REPLICAS_NOTE = "2 pods (managed by Deployment)"

REQUEST_FLOW_STEPS = (
    "Browser (HTTPS:443)",
    "Route53 DNS (pulumidemo.t8rsk8s.io)",
    "Network Load Balancer (SSL Termination)",
    "Kubernetes Service (LoadBalancer)",
    "Kubernetes Service (ClusterIP:80)",
    "Pod (Port 3000) → FastAPI → Response",
)
