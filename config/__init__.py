import importlib
import os
from types import ModuleType
from typing import Optional

_ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV chọn môi trường, mặc định là development
    env = (env or os.getenv("APP_ENV", "development")).lower()
    return _ENVIRONMENTS.get(env, "config.development")


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
