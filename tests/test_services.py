from registrycache.services import (
    RegistryCache,
    Service,
    compute_scheme,
    compute_service,
    compute_services,
)


def test_compute_scheme_follows_tls_setting():
    assert compute_scheme(RegistryCache(upstream="docker.io")) == "https"
    assert compute_scheme(RegistryCache(upstream="docker.io", tls_enabled=False)) == "http"


def test_compute_service_for_docker_io():
    service = compute_service(RegistryCache(upstream="docker.io"))
    assert service.name == "registry-docker-io"
    assert service.namespace == "kube-system"
    assert service.annotations == {
        "upstream": "docker.io",
        "remote-url": "https://registry-1.docker.io",
        "scheme": "https",
    }
    assert service.labels == {"app": "registry-docker-io", "upstream-host": "docker.io"}
    assert service.selector == service.labels


def test_compute_service_uses_given_remote_url():
    service = compute_service(
        RegistryCache(upstream="docker.io", remote_url="https://mirror.example.com", tls_enabled=False)
    )
    assert service.annotations["remote-url"] == "https://mirror.example.com"
    assert service.annotations["scheme"] == "http"


def test_compute_service_ports():
    service = compute_service(RegistryCache(upstream="quay.io"))
    assert [(p.name, p.port, p.target_port, p.protocol) for p in service.ports] == [
        ("registry-cache", 5000, "registry-cache", "TCP"),
        ("debug", 5001, "debug", "TCP"),
    ]
    assert service.type == "ClusterIP"


def test_compute_service_long_upstream_name():
    service = compute_service(RegistryCache(upstream="my-very-long-registry.very-long-subdomain.io"))
    assert service.name == "registry-my-very-long-registry-very-long-subdo-2fae3"
    assert service.labels["upstream-host"] == "my-very-long-registry.very-long-subdo-2fae3"
    assert len(service.name) <= 52


def test_compute_services_keeps_order():
    caches = [RegistryCache(upstream="quay.io"), RegistryCache(upstream="docker.io")]
    services = compute_services(caches)
    assert [s.annotations["upstream"] for s in services] == ["quay.io", "docker.io"]


def test_compute_services_empty():
    assert compute_services([]) == []


def test_to_manifest_reflects_service():
    service = compute_service(RegistryCache(upstream="docker.io"))
    manifest = service.to_manifest()
    assert manifest["kind"] == "Service"
    assert manifest["metadata"]["name"] == service.name
    assert manifest["metadata"]["namespace"] == "kube-system"
    assert manifest["metadata"]["annotations"] == service.annotations
    assert manifest["spec"]["selector"] == service.selector
    assert [p["port"] for p in manifest["spec"]["ports"]] == [5000, 5001]
    assert [p["targetPort"] for p in manifest["spec"]["ports"]] == ["registry-cache", "debug"]
    assert "clusterIP" not in manifest["spec"]


def test_to_manifest_includes_cluster_ip_when_set():
    service = Service(name="registry-docker-io", cluster_ip="10.4.0.10")
    assert service.to_manifest()["spec"]["clusterIP"] == "10.4.0.10"


def test_to_manifest_is_a_copy():
    service = compute_service(RegistryCache(upstream="docker.io"))
    manifest = service.to_manifest()
    manifest["metadata"]["labels"]["app"] = "changed"
    assert service.labels["app"] == "registry-docker-io"