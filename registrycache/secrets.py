"""Certificate configurations for the registry cache CA and TLS secrets."""

from __future__ import annotations

import enum
import ipaddress
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta

from registrycache.constants import NAMESPACE_SYSTEM, SCHEME_ANNOTATION, UPSTREAM_ANNOTATION
from registrycache.registry import compute_kubernetes_resource_name
from registrycache.services import Service

MANAGER_IDENTITY = "extension-registry-cache"
"""Identity used for the secrets manager."""

CA_NAME = "ca-extension-registry-cache"
"""Name of the CA secret."""

CA_VALIDITY = timedelta(days=730)
SERVER_CERT_VALIDITY = timedelta(days=90)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class CertType(enum.Enum):
    """Kind of certificate to generate."""

    CA = "ca"
    SERVER = "server"
    CLIENT = "client"


@dataclass(frozen=True)
class CertificateSecretConfig:
    """Settings for generating one certificate secret."""

    name: str
    common_name: str
    cert_type: CertType
    dns_names: tuple[str, ...] = ()
    ip_addresses: tuple[IPAddress, ...] = ()
    validity: timedelta | None = None
    skip_publishing_ca_certificate: bool = False


@dataclass(frozen=True)
class SecretConfig:
    """A certificate configuration with the options used to generate it."""

    config: CertificateSecretConfig
    persist: bool = False
    signed_by_ca: str | None = None
    use_old_ca: bool = False
    extra: dict[str, str] = field(default_factory=dict)


def dns_names_for_service(name: str, namespace: str) -> list[str]:
    """Return the in-cluster DNS names under which a Service is reachable."""
    return [
        name,
        f"{name}.{namespace}",
        f"{name}.{namespace}.svc",
        f"{name}.{namespace}.svc.cluster.local",
    ]


def _parse_ip(value: str) -> tuple[IPAddress, ...]:
    try:
        return (ipaddress.ip_address(value),)
    except ValueError:
        return ()


def configs_for(services: Iterable[Service]) -> list[SecretConfig]:
    """Return the CA config followed by a server config per HTTPS Service."""
    configs = [
        SecretConfig(
            config=CertificateSecretConfig(
                name=CA_NAME,
                common_name=CA_NAME,
                cert_type=CertType.CA,
                validity=CA_VALIDITY,
            ),
            persist=True,
        )
    ]

    for service in services:
        if service.annotations.get(SCHEME_ANNOTATION, "") == "http":
            continue

        name = tls_secret_name_for_upstream(service.annotations.get(UPSTREAM_ANNOTATION, ""))
        configs.append(
            SecretConfig(
                config=CertificateSecretConfig(
                    name=name,
                    common_name=name,
                    cert_type=CertType.SERVER,
                    dns_names=tuple(dns_names_for_service(service.name, NAMESPACE_SYSTEM)),
                    ip_addresses=_parse_ip(service.cluster_ip),
                    validity=SERVER_CERT_VALIDITY,
                    skip_publishing_ca_certificate=True,
                ),
                signed_by_ca=CA_NAME,
                use_old_ca=True,
            )
        )

    return configs


def tls_secret_name_for_upstream(upstream: str) -> str:
    """Return the TLS secret name for an upstream."""
    return compute_kubernetes_resource_name(upstream) + "-tls"