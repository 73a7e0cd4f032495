"""HTTP core, configuration, errors and logging shared by Direct Link services."""

from .config import DEFAULT_SERVICE_URL, DirectLinkSettings, get_settings, reset_settings
from .errors import DirectLinkApiError, DirectLinkConnectionError, DirectLinkError
from .logging_config import get_logger, setup_logging
from .response import DetailedResponse
from .service import BaseService
from .utils import get_query_param, get_sdk_headers

__all__ = [
    "DEFAULT_SERVICE_URL",
    "BaseService",
    "DetailedResponse",
    "DirectLinkApiError",
    "DirectLinkConnectionError",
    "DirectLinkError",
    "DirectLinkSettings",
    "get_logger",
    "get_query_param",
    "get_sdk_headers",
    "get_settings",
    "reset_settings",
    "setup_logging",
]
