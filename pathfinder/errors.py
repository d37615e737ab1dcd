class PathfinderError(Exception):
    """Base class of all errors raised by the pathfinder."""


class SearchError(PathfinderError):
    """The search engine was driven outside of its allowed lifecycle."""


class SearchNotStartedError(SearchError):
    def __init__(self, message: str = "Search has not been started. Set origin and destination first."):
        super().__init__(message)


class SearchFinishedError(SearchError):
    def __init__(self, message: str = "Search has already terminated. Reset the run before advancing."):
        super().__init__(message)


class NoPathError(PathfinderError):
    def __init__(self, message: str = "No path available."):
        super().__init__(message)


class RunInProgressError(PathfinderError):
    def __init__(self, action: str):
        super().__init__(f"Cannot {action} while a run is in progress.")
