class PostActionInfrastructureError(Exception):
    pass


class DataSourceError(PostActionInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass
