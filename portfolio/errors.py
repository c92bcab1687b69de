class PortfolioError(Exception):
    """Base class for errors raised by the content pipeline."""


class FilesystemError(PortfolioError):
    """The content directory, or a file inside it, could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot read content at {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
