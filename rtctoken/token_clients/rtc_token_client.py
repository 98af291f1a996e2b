from .token_client import TokenClient
from ..http_client import HttpClient
from ..models import TokenResult


class RtcTokenClient(TokenClient):
    """Fetches RTC tokens from a token server, one request per call.

    Tokens are never cached: each call asks the server again.
    """

    def __init__(self, domain: str, debug: bool = False, options: dict = {}):
        self.http_client = HttpClient(domain=domain, debug=debug, options=options)

    def get_token(self, channel_name: str, user_id: int = 0) -> str:
        return self.get_token_result(channel_name=channel_name, user_id=user_id).token_or_empty

    def get_token_result(self, channel_name: str, user_id: int = 0) -> TokenResult:
        return self.http_client.fetch(channel_name=channel_name, user_id=user_id)

    def get_token_or_raise(self, channel_name: str, user_id: int = 0) -> str:
        result = self.get_token_result(channel_name=channel_name, user_id=user_id)
        result.raise_for_error()
        return result.token


def fetch_rtc_token(domain: str, channel_name: str, user_id: int = 0, **kwargs) -> str:
    """Fetch a token for ``channel_name`` from the token server at ``domain``.

    ``user_id`` 0 asks for a token valid for any user. Returns an empty string
    on any failure; use ``RtcTokenClient.get_token_result`` to find out why.
    """
    return RtcTokenClient(domain=domain, **kwargs).get_token(channel_name=channel_name, user_id=user_id)
