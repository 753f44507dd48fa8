from controlbinding.core.logging import setup_logging
from controlbinding.core.config import BindingSettings, load_settings

__all__ = ["setup_logging", "BindingSettings", "load_settings"]
