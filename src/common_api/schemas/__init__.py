"""Exports of the pydantic models exchanged with the REST backend."""

from . import auth, common, organization, person, region, system
from .auth import *  # noqa: F401,F403 - re-export payload models
from .common import *  # noqa: F401,F403
from .organization import *  # noqa: F401,F403
from .person import *  # noqa: F401,F403
from .region import *  # noqa: F401,F403
from .system import *  # noqa: F401,F403

_MODULES = (common, region, person, organization, system, auth)

__all__ = [name for module in _MODULES for name in module.__all__]


def _rebuild_models() -> None:
    for module in _MODULES:
        for name in module.__all__:
            attr = getattr(module, name, None)
            rebuild = getattr(attr, "model_rebuild", None)
            if callable(rebuild):
                rebuild()


_rebuild_models()
