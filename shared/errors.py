from typing import Any


class RelayError(Exception):
    pass


class PaymentValidationError(RelayError):
    def __init__(self, error: str, message: str) -> None:
        super().__init__(f"{error}: {message}")
        self.error = error
        self.message = message


class ConfigurationError(RelayError):
    pass


class UpstreamError(RelayError):
    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details if details is not None else message
        self.status_code = status_code


class SignatureMismatchError(RelayError):
    pass
