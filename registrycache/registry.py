"""Naming helpers for registry cache resources."""

import hashlib

from registrycache.constants import UPSTREAM_HOST_LABEL

# A label value and a resource name may be at most 63 characters, but Pods of a
# StatefulSet whose name exceeds 52 characters cannot be created. Resource names
# carry the prefix "registry-", which leaves 43 characters for the label value.
_LABEL_VALUE_LIMIT = 43
_HASH_LENGTH = 5


def get_upstream_url(upstream: str) -> str:
    """Return the URL of the given upstream registry."""
    if upstream == "docker.io":
        return "https://registry-1.docker.io"
    return "https://" + upstream


def get_labels(name: str, upstream_label: str) -> dict[str, str]:
    """Return the 'app' and 'upstream-host' labels."""
    return {"app": name, UPSTREAM_HOST_LABEL: upstream_label}


def compute_upstream_label_value(upstream: str) -> str:
    """Compute the 'upstream-host' label value for an upstream.

    The ':' before a port becomes '-'. Upstreams longer than 43 characters are
    cut to 37 characters and suffixed with '-' and the first five hex digits of
    their SHA-256 hash, so the result is at most 43 characters long.
    """
    label = upstream.replace(":", "-")
    if len(upstream) > _LABEL_VALUE_LIMIT:
        digest = hashlib.sha256(upstream.encode()).hexdigest()[:_HASH_LENGTH]
        limit = _LABEL_VALUE_LIMIT - _HASH_LENGTH - 1
        label = f"{label[:limit]}-{digest}"
    return label


def compute_kubernetes_resource_name(upstream: str) -> str:
    """Compute a resource name (at most 52 characters) for an upstream."""
    label = compute_upstream_label_value(upstream)
    return "registry-" + label.replace(".", "-")