from confirm_core.app import create_app
from confirm_core.config import CoreConfig, load_core_config
from confirm_core.errors import ConfirmServiceError, StoreError, TemplateLoadError

__version__ = "0.1.0"

__all__ = [
    "ConfirmServiceError",
    "CoreConfig",
    "StoreError",
    "TemplateLoadError",
    "__version__",
    "create_app",
    "load_core_config",
]
