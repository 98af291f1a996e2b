from .__version__ import __version__
from .exceptions import TokenClientException, TokenServerException
from .http_client import HttpClient
from .models import (
    HttpOptions,
    TokenRequest,
    TokenResponse,
    TokenResult,
    FailureReason,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
)
from .token_clients import TokenClient, RtcTokenClient, fetch_rtc_token
