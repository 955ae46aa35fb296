"""Names, labels, annotations and ports shared by the registry cache components."""

from typing import Final

REGISTRY_CACHE_EXTENSION_TYPE: Final = "registry-cache"
"""Name of the registry-cache Extension type."""

REGISTRY_MIRROR_EXTENSION_TYPE: Final = "registry-mirror"
"""Name of the registry-mirror Extension type."""

ORIGIN: Final = "registry-cache"
"""Origin used for the registry cache managed resources."""

UPSTREAM_HOST_LABEL: Final = "upstream-host"
"""Label on registry cache resources (Service, StatefulSet) denoting the upstream host."""

REGISTRY_CACHE_SERVER_PORT: Final = 5000
"""Port on which the pull through cache server is served."""

REGISTRY_CACHE_DEBUG_PORT: Final = 5001
"""Port on which the debug server (metrics and health endpoints) is served."""

REMOTE_URL_ANNOTATION: Final = "remote-url"
"""Annotation on a registry cache Service denoting the upstream registry URL."""

UPSTREAM_ANNOTATION: Final = "upstream"
"""Annotation on a registry cache Service denoting the upstream host and optional port."""

SCHEME_ANNOTATION: Final = "scheme"
"""Annotation on a registry cache Service denoting the scheme ("http" or "https")."""

NAMESPACE_SYSTEM: Final = "kube-system"
"""Namespace in the shoot cluster where the registry caches live."""