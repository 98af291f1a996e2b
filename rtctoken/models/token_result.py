from enum import Enum

from ..exceptions import TokenClientException, TokenServerException


class FailureReason(str, Enum):
    INVALID_URL = "invalid_url"
    TRANSPORT_ERROR = "transport_error"
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    MALFORMED_JSON = "malformed_json"
    MISSING_FIELD = "missing_field"


class TokenResult:
    """Terminal outcome of a single token request.

    Holds either the token or the reason the request failed, together with
    whatever the transport produced along the way (URL, HTTP status, raw body,
    underlying exception) so failures can be told apart.
    """

    def __init__(self, token=None, reason=None, url=None, status_code=None, body=None, error=None):
        self.token = token
        self.reason = reason
        self.url = url
        self.status_code = status_code
        self.body = body
        self.error = error

    @classmethod
    def success(cls, token, url, status_code):
        return cls(token=token, url=url, status_code=status_code)

    @classmethod
    def failure(cls, reason, url=None, status_code=None, body=None, error=None):
        return cls(reason=reason, url=url, status_code=status_code, body=body, error=error)

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def token_or_empty(self) -> str:
        return self.token if self.ok else ""

    def raise_for_error(self):
        if self.ok:
            return
        message = f"Unable to fetch RTC token: {self.reason.value}"
        if self.url is not None:
            message += f" - {self.url}"
        if self.status_code is not None:
            message += f" (HTTP {self.status_code})"
        if self.reason == FailureReason.INVALID_URL:
            raise TokenClientException(message) from self.error
        raise TokenServerException(message) from self.error

    def __repr__(self):
        if self.ok:
            return f"TokenResult(ok, status_code={self.status_code})"
        return f"TokenResult({self.reason.value}, status_code={self.status_code}, error={self.error!r})"
