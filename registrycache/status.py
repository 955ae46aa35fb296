"""Provider status reported on the registry-cache Extension resource."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from registrycache.constants import (
    REGISTRY_CACHE_SERVER_PORT,
    REMOTE_URL_ANNOTATION,
    SCHEME_ANNOTATION,
    UPSTREAM_ANNOTATION,
)
from registrycache.services import Service

API_VERSION = "registry.extensions.gardener.cloud/v1alpha3"
KIND = "RegistryStatus"


@dataclass(frozen=True)
class RegistryCacheStatus:
    """Where a deployed registry cache can be reached."""

    upstream: str
    endpoint: str
    remote_url: str

    def to_dict(self) -> dict[str, Any]:
        return {"upstream": self.upstream, "endpoint": self.endpoint, "remoteURL": self.remote_url}


@dataclass(frozen=True)
class RegistryStatus:
    """Status of all registry caches of a shoot."""

    caches: list[RegistryCacheStatus] = field(default_factory=list)
    ca_secret_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the status as a serialisable dictionary."""
        result: dict[str, Any] = {
            "apiVersion": API_VERSION,
            "kind": KIND,
            "caches": [cache.to_dict() for cache in self.caches],
        }
        if self.ca_secret_name is not None:
            result["caSecretName"] = self.ca_secret_name
        return result


def compute_provider_status(services: Iterable[Service], ca_secret_name: str | None) -> RegistryStatus:
    """Build the provider status from the registry cache Services."""
    caches = [
        RegistryCacheStatus(
            upstream=service.annotations.get(UPSTREAM_ANNOTATION, ""),
            endpoint=(
                f"{service.annotations.get(SCHEME_ANNOTATION, '')}://"
                f"{service.cluster_ip}:{REGISTRY_CACHE_SERVER_PORT}"
            ),
            remote_url=service.annotations.get(REMOTE_URL_ANNOTATION, ""),
        )
        for service in services
    ]
    return RegistryStatus(caches=caches, ca_secret_name=ca_secret_name)