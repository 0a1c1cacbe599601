"""Registry bootstrap (import side-effect)."""
from .api import set_registry, get_settings
from ._bootstrap import build_registry

set_registry(build_registry(get_settings().locale))
