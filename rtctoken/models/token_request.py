import re

from pydantic import AnyHttpUrl, BaseModel, StrictStr, ValidationError, conint, constr, validator

# characters allowed unescaped in a single URL path segment (RFC 3986 pchar)
CHANNEL_NAME_RE = re.compile(r"^[A-Za-z0-9\-._~!$&'()*+,;=:@]+$")

# a base URL may carry a path but no query, fragment or characters needing escape
DOMAIN_FORBIDDEN_RE = re.compile(r"[\s?#\"<>\\^`{|}]")

URL_TEMPLATE = "{domain}/rtc/{channel_name}/publisher/uid/{user_id}/"


class TokenServerUrl(BaseModel):
    url: AnyHttpUrl


class TokenRequest(BaseModel):
    domain: StrictStr
    channel_name: constr(strict=True, min_length=1)
    user_id: conint(strict=True, ge=0) = 0

    @validator("domain")
    def domain_is_base_url(cls, value):
        try:
            TokenServerUrl(url=value)
        except ValidationError:
            raise ValueError("should be an absolute http(s) URL")
        if DOMAIN_FORBIDDEN_RE.search(value):
            raise ValueError("should not contain a query, a fragment or characters not allowed in a URL path")
        return value

    @validator("channel_name")
    def channel_name_is_path_safe(cls, value):
        if not CHANNEL_NAME_RE.match(value):
            raise ValueError("should only contain characters allowed in a URL path segment")
        return value

    @property
    def url(self):
        return URL_TEMPLATE.format(domain=self.domain, channel_name=self.channel_name, user_id=self.user_id)

    class Config:
        frozen = True
