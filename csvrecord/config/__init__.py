from .loader import ConfigError, load_options, options_from_mapping

__all__ = ["ConfigError", "load_options", "options_from_mapping"]
