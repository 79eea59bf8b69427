from .loader import config_candidates, load_config
from .models import ConverterSettings, PdfCreatorConfig

__all__ = [
    "ConverterSettings",
    "PdfCreatorConfig",
    "config_candidates",
    "load_config",
]
