from .options import (
    DEFAULTS,
    ClientConfig,
    ClientDefaults,
    ClientOptions,
    ImageAnalysisOptions,
    TextResponseOptions,
    merge_config,
    normalize_image_options,
)

__all__ = [
    "DEFAULTS",
    "ClientConfig",
    "ClientDefaults",
    "ClientOptions",
    "ImageAnalysisOptions",
    "TextResponseOptions",
    "merge_config",
    "normalize_image_options",
]
