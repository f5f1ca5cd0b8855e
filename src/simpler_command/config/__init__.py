from simpler_command.config.app_config import (
    AppConfig,
    GeneratorConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)

__all__ = ["AppConfig", "GeneratorConfig", "LogLevel", "LoggingConfig", "load_config"]
