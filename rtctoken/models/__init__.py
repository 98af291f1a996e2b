from .http_options import HttpOptions, DEFAULT_HTTP_TIMEOUT_SECONDS
from .token_request import TokenRequest
from .token_response import TokenResponse
from .token_result import TokenResult, FailureReason
