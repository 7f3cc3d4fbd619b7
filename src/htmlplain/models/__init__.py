"""htmlplain configuration models."""

from .config import ConversionConfig, HtmlPlainConfig

__all__ = [
    "ConversionConfig",
    "HtmlPlainConfig",
]
