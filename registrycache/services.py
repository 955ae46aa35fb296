"""Services that expose the registry caches inside the shoot cluster."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from registrycache.constants import (
    NAMESPACE_SYSTEM,
    REGISTRY_CACHE_DEBUG_PORT,
    REGISTRY_CACHE_SERVER_PORT,
    REMOTE_URL_ANNOTATION,
    SCHEME_ANNOTATION,
    UPSTREAM_ANNOTATION,
)
from registrycache.registry import (
    compute_upstream_label_value,
    get_labels,
    get_upstream_url,
)


@dataclass(frozen=True)
class RegistryCache:
    """A configured pull through cache for one upstream registry."""

    upstream: str
    remote_url: str | None = None
    tls_enabled: bool = True


@dataclass(frozen=True)
class ServicePort:
    """A named TCP port of a Service."""

    name: str
    port: int
    target_port: str
    protocol: str = "TCP"

    def to_manifest(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "port": self.port,
            "protocol": self.protocol,
            "targetPort": self.target_port,
        }


@dataclass
class Service:
    """A ClusterIP Service fronting one registry cache."""

    name: str
    namespace: str = NAMESPACE_SYSTEM
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    selector: dict[str, str] = field(default_factory=dict)
    ports: list[ServicePort] = field(default_factory=list)
    type: str = "ClusterIP"
    cluster_ip: str = ""

    def to_manifest(self) -> dict[str, Any]:
        """Return the Service as a Kubernetes manifest dictionary."""
        spec: dict[str, Any] = {
            "selector": dict(self.selector),
            "ports": [port.to_manifest() for port in self.ports],
            "type": self.type,
        }
        if self.cluster_ip:
            spec["clusterIP"] = self.cluster_ip
        return {
            "apiVersion": "v1",
            "kind": "Service",
            "metadata": {
                "name": self.name,
                "namespace": self.namespace,
                "labels": dict(self.labels),
                "annotations": dict(self.annotations),
            },
            "spec": spec,
        }


def compute_scheme(cache: RegistryCache) -> str:
    """Return "https" when TLS is enabled for the cache, "http" otherwise."""
    return "https" if cache.tls_enabled else "http"


def compute_service(cache: RegistryCache) -> Service:
    """Build the Service for a registry cache."""
    upstream_label = compute_upstream_label_value(cache.upstream)
    name = "registry-" + upstream_label.replace(".", "-")
    remote_url = cache.remote_url if cache.remote_url is not None else get_upstream_url(cache.upstream)

    return Service(
        name=name,
        namespace=NAMESPACE_SYSTEM,
        labels=get_labels(name, upstream_label),
        annotations={
            UPSTREAM_ANNOTATION: cache.upstream,
            REMOTE_URL_ANNOTATION: remote_url,
            SCHEME_ANNOTATION: compute_scheme(cache),
        },
        selector=get_labels(name, upstream_label),
        ports=[
            ServicePort(name="registry-cache", port=REGISTRY_CACHE_SERVER_PORT, target_port="registry-cache"),
            ServicePort(name="debug", port=REGISTRY_CACHE_DEBUG_PORT, target_port="debug"),
        ],
    )


def compute_services(caches: Iterable[RegistryCache]) -> list[Service]:
    """Build the Services for all configured caches, in order."""
    return [compute_service(cache) for cache in caches]