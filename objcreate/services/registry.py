"""Maps (interface_name, impl_name) to concrete class paths.

String paths keep imports lazy: importing the registry does not pull in
prometheus_client unless that implementation is selected.
"""

import importlib
from typing import Any

REGISTRY: dict[str, dict[str, str]] = {
    "metrics": {
        "noop": "objcreate.services.metrics.noop_metrics.NoopMetrics",
        "memory": "objcreate.services.metrics.memory_metrics.MemoryMetrics",
        "prometheus": "objcreate.services.metrics.prometheus_metrics.PrometheusMetrics",
    },
}


def resolve_class(dotted_path: str) -> type[Any]:
    """Import and return a class from a dotted module.ClassName path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resolve_implementation(interface_name: str, impl_name: str) -> type[Any]:
    """Look up the concrete class registered under *impl_name*."""
    impls = REGISTRY.get(interface_name)
    if impls is None:
        raise ValueError(f"Unknown interface: '{interface_name}'")
    dotted = impls.get(impl_name)
    if dotted is None:
        raise ValueError(
            f"Unknown implementation '{impl_name}' for {interface_name} "
            f"(available: {', '.join(impls)})"
        )
    return resolve_class(dotted)
