from .token_client import TokenClient
from .rtc_token_client import RtcTokenClient, fetch_rtc_token
