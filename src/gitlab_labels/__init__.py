"""Public package surface for the GitLab labels client."""

from .client import GitLab
from .config import DEFAULT_BASE_URL, ClientConfig
from .errors import *
from .resources._common_types import NumericID, PathName, ProjectRef, parse_id
from .resources.labels_types import *
from .response import Response

__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "GitLab",
    "NumericID",
    "PathName",
    "ProjectRef",
    "Response",
    "parse_id",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "GitLabError",
    "HTTPStatusError",
    "RateLimitError",
    "TransportError",
    "ValidationError",
    "CreateLabelOptions",
    "DeleteLabelOptions",
    "Label",
    "LabelPayload",
    "ListLabelsOptions",
    "UpdateLabelOptions",
]
