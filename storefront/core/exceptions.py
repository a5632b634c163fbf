class HttpException(Exception):
    """Service-level failure carrying the HTTP status and message to send back."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
