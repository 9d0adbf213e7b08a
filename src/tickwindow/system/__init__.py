"""
System configuration package.

Exports:
    - SystemConfig: Complete library configuration (logging + indicator defaults)
    - IndicatorDefaults: Default window lengths per registry name
    - get_system_config: Get system config singleton
    - reload_system_config: Force reload system config
    - LoggerFactory: Factory for creating configured loggers
    - LoggingConfig: Logging configuration model
"""

from tickwindow.system.config import IndicatorDefaults, SystemConfig, get_system_config, reload_system_config
from tickwindow.system.log_system import LoggerFactory, LoggingConfig

__all__ = [
    "SystemConfig",
    "IndicatorDefaults",
    "get_system_config",
    "reload_system_config",
    "LoggerFactory",
    "LoggingConfig",
]
