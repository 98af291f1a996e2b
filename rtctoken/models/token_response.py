from pydantic import BaseModel, Field, StrictStr


class TokenResponse(BaseModel):
    rtc_token: StrictStr = Field(..., alias="rtcToken")
