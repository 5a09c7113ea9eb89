from enum import StrEnum


class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class NetworkFailure(AppError):
    """The outbound model call could not complete."""

    def __init__(self, message: str):
        super().__init__(message, code="NETWORK_FAILURE")


class NormalizationKind(StrEnum):
    malformed_payload = "MALFORMED_PAYLOAD"
    empty_result = "EMPTY_RESULT"


class NormalizationError(AppError):
    """The model replied, but the reply could not be turned into recommendations."""

    def __init__(self, message: str, kind: NormalizationKind):
        self.kind = kind
        super().__init__(message, code=kind.value)


class MalformedPayload(NormalizationError):
    def __init__(self, message: str, reason: str | None = None):
        self.reason = reason
        super().__init__(message, NormalizationKind.malformed_payload)


class EmptyResult(NormalizationError):
    def __init__(self, message: str = "The agent returned no usable recommendations."):
        super().__init__(message, NormalizationKind.empty_result)
