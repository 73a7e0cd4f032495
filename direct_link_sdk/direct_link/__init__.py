"""Direct Link v1 service client and models.

Exposes ``DirectLinkV1`` and ``PortsPager`` and re-exports the models from
the ``direct_link.models`` subpackage for convenience.
"""

from .client import DirectLinkV1
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .pager import PortsPager

__all__ = [
    "DirectLinkV1",
    "PortsPager",
    *_models_all,
]
