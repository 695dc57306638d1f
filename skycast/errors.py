"""
Failure taxonomy for weather queries.

Lower layers raise these; QueryController is the only place that turns a
kind into a user-facing message.
"""

from enum import StrEnum


class WeatherErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    MISSING_CREDENTIAL = "missing_credential"
    POSITIONING_UNAVAILABLE = "positioning_unavailable"
    POSITIONING_DENIED = "positioning_denied"
    POSITIONING_TIMEOUT = "positioning_timeout"
    NETWORK_ERROR = "network_error"
    NOT_FOUND = "not_found"
    MALFORMED_RESPONSE = "malformed_response"
    PROVIDER_ERROR = "provider_error"


class WeatherQueryError(Exception):
    """Base class for all classified query failures"""

    kind: WeatherErrorKind = WeatherErrorKind.NETWORK_ERROR

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.kind.value)
        self.detail = detail


class InvalidInputError(WeatherQueryError):
    kind = WeatherErrorKind.INVALID_INPUT


class MissingCredentialError(WeatherQueryError):
    kind = WeatherErrorKind.MISSING_CREDENTIAL


class PositioningUnavailableError(WeatherQueryError):
    kind = WeatherErrorKind.POSITIONING_UNAVAILABLE


class PositioningDeniedError(WeatherQueryError):
    kind = WeatherErrorKind.POSITIONING_DENIED


class PositioningTimeoutError(WeatherQueryError):
    kind = WeatherErrorKind.POSITIONING_TIMEOUT


class NetworkError(WeatherQueryError):
    kind = WeatherErrorKind.NETWORK_ERROR


class NotFoundError(WeatherQueryError):
    kind = WeatherErrorKind.NOT_FOUND


class MalformedResponseError(WeatherQueryError):
    kind = WeatherErrorKind.MALFORMED_RESPONSE


class ProviderError(WeatherQueryError):
    """Provider answered with a status that is neither success nor not-found"""

    kind = WeatherErrorKind.PROVIDER_ERROR

    def __init__(self, status: str, detail: str = ""):
        super().__init__(detail or f"provider status {status}")
        self.status = status
