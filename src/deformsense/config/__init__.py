"""Configuration objects and helpers for the deformation engine.

This package knows how to load an optional YAML file (``engine.yaml``) whose
keys may sit at the top level or under an ``engine:`` block. The resulting
typed dataclass (see :mod:`runtime`) configures byte polling, the default
form label, idle-tick sampling, and logging consistently.
"""

from .runtime import EngineConfig, config_from_mapping, configure_logging, load_config

__all__ = ["EngineConfig", "config_from_mapping", "configure_logging", "load_config"]
