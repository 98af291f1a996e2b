import requests
from pydantic import ValidationError

from .exceptions import TokenClientException
from .models import HttpOptions, TokenRequest, TokenResponse, TokenResult, FailureReason


class HttpClient:
    def __init__(self, domain, debug=False, options={}):
        self.domain = domain
        self.debug = debug
        try:
            self.options = HttpOptions(**options)
        except ValidationError as e:
            raise TokenClientException("Invalid HTTP options") from e

        self.log(f"Using token server: {self.domain}. Connection timeout {self.options.timeout}s")

    def get_request_url(self, channel_name, user_id=0):
        try:
            url = TokenRequest(domain=self.domain, channel_name=channel_name, user_id=user_id).url
        except ValidationError as e:
            raise TokenClientException("Unable to build token request URL") from e
        return url

    def fetch(self, channel_name, user_id=0):
        try:
            url = self.get_request_url(channel_name, user_id)
        except TokenClientException as e:
            return self.fail(FailureReason.INVALID_URL, error=e.__cause__)

        try:
            res = requests.request(method="GET", url=url, timeout=self.options.timeout)
        except requests.exceptions.RequestException as e:
            return self.fail(FailureReason.TRANSPORT_ERROR, url=url, error=e)

        if not 200 <= res.status_code < 300:
            return self.fail(FailureReason.HTTP_STATUS, url=url, status_code=res.status_code, body=res.text)

        if not res.content:
            return self.fail(FailureReason.EMPTY_BODY, url=url, status_code=res.status_code)

        try:
            data = res.json()
        except ValueError as e:
            return self.fail(FailureReason.MALFORMED_JSON, url=url, status_code=res.status_code, body=res.text, error=e)

        if not isinstance(data, dict):
            return self.fail(FailureReason.MALFORMED_JSON, url=url, status_code=res.status_code, body=res.text)

        try:
            token_response = TokenResponse(**data)
        except ValidationError as e:
            return self.fail(FailureReason.MISSING_FIELD, url=url, status_code=res.status_code, body=res.text, error=e)

        return TokenResult.success(token=token_response.rtc_token, url=url, status_code=res.status_code)

    def fetch_token(self, channel_name, user_id=0) -> str:
        return self.fetch(channel_name, user_id).token_or_empty

    def fail(self, reason, **kwargs):
        result = TokenResult.failure(reason, **kwargs)
        self.log(f"Token request failed: {result!r}")
        return result

    def log(self, *args):
        if self.debug:
            print("[rtctoken] ", *args)
