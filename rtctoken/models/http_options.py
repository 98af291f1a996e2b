from pydantic import BaseModel, confloat

DEFAULT_HTTP_TIMEOUT_SECONDS = 10


class HttpOptions(BaseModel):
    timeout: confloat(gt=0) = DEFAULT_HTTP_TIMEOUT_SECONDS
