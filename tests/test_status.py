from registrycache.services import RegistryCache, compute_service
from registrycache.status import RegistryStatus, compute_provider_status


def _deployed(upstream, cluster_ip, **kwargs):
    service = compute_service(RegistryCache(upstream=upstream, **kwargs))
    service.cluster_ip = cluster_ip
    return service


def test_compute_provider_status_endpoints():
    services = [
        _deployed("docker.io", "10.4.0.10"),
        _deployed("quay.io", "10.4.0.11", tls_enabled=False),
    ]
    status = compute_provider_status(services, "ca-bundle")
    assert [c.upstream for c in status.caches] == ["docker.io", "quay.io"]
    assert status.caches[0].endpoint == "https://10.4.0.10:5000"
    assert status.caches[1].endpoint.startswith("http://10.4.0.11:")
    assert status.caches[0].remote_url == "https://registry-1.docker.io"
    assert status.ca_secret_name == "ca-bundle"


def test_custom_remote_url_is_reported():
    services = [_deployed("docker.io", "10.4.0.10", remote_url="https://mirror.example.com")]
    status = compute_provider_status(services, None)
    assert status.caches[0].remote_url == "https://mirror.example.com"


def test_to_dict():
    services = [_deployed("docker.io", "10.4.0.10")]
    data = compute_provider_status(services, "ca-bundle").to_dict()
    assert data["kind"] == "RegistryStatus"
    assert data["apiVersion"].endswith("/v1alpha3")
    assert data["caSecretName"] == "ca-bundle"
    assert data["caches"][0]["upstream"] == "docker.io"
    assert data["caches"][0]["remoteURL"] == "https://registry-1.docker.io"


def test_to_dict_omits_missing_ca_secret_name():
    data = compute_provider_status([], None).to_dict()
    assert "caSecretName" not in data
    assert data["caches"] == []


def test_empty_status():
    assert compute_provider_status([], None) == RegistryStatus()