class MSTError(Exception):
    pass


class EmptyCollectionError(MSTError, IndexError):
    pass


class EmptyQueueError(EmptyCollectionError):
    pass


class EmptyListError(EmptyCollectionError):
    pass


class NotFoundError(MSTError, LookupError):
    '''A vertex resolved to a root that no tree in the list owns'''


class DisconnectedGraphError(MSTError):
    pass


class UnsupportedOperationError(MSTError):
    pass


class MergedTreeError(MSTError):
    '''A partial tree was used after being merged into another one'''


class GraphFormatError(MSTError, ValueError):
    def __init__(self, msg: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(msg)
