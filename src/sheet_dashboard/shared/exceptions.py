class SheetError(Exception):
    pass


class FetchError(SheetError):
    """Raised when the CSV export endpoint cannot be read.

    ``status_code`` is the HTTP status of a non-2xx response, or ``None``
    when the request never produced one (DNS, timeout, connection reset).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
