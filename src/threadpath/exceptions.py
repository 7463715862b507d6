"""Exception hierarchy for Threadpath."""


class ThreadpathError(Exception):
    """Base exception for all Threadpath errors."""

    pass


class InputError(ThreadpathError):
    """Errors related to reading input drawings."""

    pass


class InputLoadError(InputError):
    """Error loading an input file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load input '{path}': {reason}")


class InputFormatError(InputError):
    """Unsupported or invalid input format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid input format '{path}': {details}")


class GeometryError(ThreadpathError):
    """Errors in geometric calculations."""

    pass


class CurveError(GeometryError):
    """Malformed curve control point data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WriteError(ThreadpathError):
    """Error serializing stitches to an embroidery file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write embroidery file '{path}': {reason}")


class UnsupportedFormatError(WriteError):
    """No embroidery writer exists for the requested output extension."""

    def __init__(self, path: str, extension: str) -> None:
        self.extension = extension
        super().__init__(path, f"unsupported output format '.{extension}'")


class EmptyDesignError(InputError):
    """Input produced no stitches."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Nothing to stitch in '{path}'")
