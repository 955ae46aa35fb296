"""Resource names, Service manifests, certificate configs and status for registry caches."""

__version__ = "0.1.0"