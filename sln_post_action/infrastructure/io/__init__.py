from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    PostActionInfrastructureError,
)

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "PostActionInfrastructureError",
]
