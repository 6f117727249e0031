from __future__ import annotations

from objcreate.config.settings import CreatorConfig
from objcreate.creation.creator import ObjectCreator
from objcreate.services.logger.factory import LoggerFactory
from objcreate.services.logger.interface import LoggingInterface
from objcreate.services.metrics.interface import MetricsInterface
from objcreate.services.metrics.noop_metrics import NoopMetrics
from objcreate.services.registry import resolve_implementation


def build_object_creator(config: CreatorConfig | None = None) -> ObjectCreator:
    """Wire a new ObjectCreator with the logger and metrics *config* selects."""
    config = config if config is not None else CreatorConfig()
    logger = LoggerFactory(default_impl=config.log_impl, level=config.log_level).create()
    metrics = _create_metrics(config, logger)
    logger.debug(
        "Object creator configured",
        log_impl=config.log_impl,
        metrics_impl=config.metrics_impl,
    )
    return ObjectCreator(logger=logger, metrics=metrics)


def _create_metrics(config: CreatorConfig, logger: LoggingInterface) -> MetricsInterface:
    impl_cls = resolve_implementation("metrics", config.metrics_impl)
    # Backends that take settings declare a one-argument constructor for them.
    bootstrap = ObjectCreator(logger=logger, metrics=NoopMetrics())
    if bootstrap.has_constructor(impl_cls, 1):
        return bootstrap.create_instance(impl_cls, config)
    return bootstrap.create_instance(impl_cls)
