from .defaults import ExportConfig


def default_config() -> ExportConfig:
    return ExportConfig()


__all__ = ["ExportConfig", "default_config"]
