# registrycache

Building blocks for running pull-through container registry caches inside a
Kubernetes cluster. The package computes what can be derived from a list of
upstream registries without talking to a cluster:

- resource names and label values for each upstream, which stay within
  Kubernetes name limits (`registrycache.registry`);
- the `Service` objects in `kube-system` that front each cache
  (`registrycache.services`);
- certificate configurations for a CA and for each TLS-enabled cache
  (`registrycache.secrets`);
- the provider status reported for the deployed caches
  (`registrycache.status`).

Shared names, labels, annotations and ports live in `registrycache.constants`
(for example `REGISTRY_CACHE_SERVER_PORT = 5000`,
`REGISTRY_CACHE_DEBUG_PORT = 5001`, `UPSTREAM_HOST_LABEL = "upstream-host"`).

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Names and labels

```python
from registrycache.registry import (
    compute_kubernetes_resource_name,
    compute_upstream_label_value,
    get_labels,
    get_upstream_url,
)

get_upstream_url("docker.io")                         # "https://registry-1.docker.io"
get_upstream_url("quay.io")                           # "https://quay.io"
compute_upstream_label_value("my-registry.io:5000")   # "my-registry.io-5000"
compute_kubernetes_resource_name("my-registry.io")    # "registry-my-registry-io"
get_labels("registry-quay-io", "quay.io")             # {"app": ..., "upstream-host": ...}
```

A `:` before a port becomes `-`. Upstreams longer than 43 characters are cut
to 37 characters and suffixed with `-` and the first five hex digits of their
SHA-256 hash, so label values stay at most 43 characters and resource names
(`registry-` plus the label value with `.` replaced by `-`) at most 52.

## Services

```python
from registrycache.services import RegistryCache, compute_services

services = compute_services([
    RegistryCache(upstream="docker.io"),
    RegistryCache(upstream="quay.io", tls_enabled=False),
])
manifest = services[0].to_manifest()
```

`RegistryCache` holds the `upstream`, an optional `remote_url` (defaulting
to the URL from `get_upstream_url`) and `tls_enabled` (default `True`).
`compute_service` builds one `Service` and `compute_services` builds them in
order. Each service is of type `ClusterIP`, exposes port 5000 (`registry-cache`)
and port 5001 (`debug`), and is annotated with the upstream, the remote URL
and the scheme from `compute_scheme` (`https` when TLS is enabled, `http`
otherwise). `Service.to_manifest()` returns a plain dictionary;
`clusterIP` is included only when `cluster_ip` is set.

## Certificates

```python
from registrycache.secrets import configs_for, tls_secret_name_for_upstream

configs = configs_for(services)
tls_secret_name_for_upstream("docker.io")   # "registry-docker-io-tls"
```

The first `SecretConfig` is always the persisted CA
(`ca-extension-registry-cache`, valid 730 days). Every service whose `scheme`
annotation is not `http` gets a `CertType.SERVER` certificate, valid 90 days
and signed by that CA, for the names returned by `dns_names_for_service` and
the service's cluster IP (left out if it is not a valid IP address).

## Status

```python
from registrycache.status import compute_provider_status

status = compute_provider_status(services, "ca-extension-registry-cache")
status.to_dict()
```

Each `RegistryCacheStatus` carries the upstream, the endpoint
`<scheme>://<cluster-ip>:5000` and the remote URL, all read from the
service's annotations and cluster IP. `RegistryStatus.to_dict()` adds the
`apiVersion` and `kind`, and `caSecretName` only when one is given.

## What this package does not do

It does not connect to a cluster, create or delete resources, generate or
store certificates, or wait for anything to become healthy; it only computes
the objects and values described above. It provides no Prometheus rules or
scrape configuration, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```