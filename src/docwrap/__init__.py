"""docwrap package root."""

from docwrap.exceptions import ConfigError, DocwrapError, PayloadError

__all__ = ["__version__", "ConfigError", "DocwrapError", "PayloadError"]

__version__ = "0.1.0"
