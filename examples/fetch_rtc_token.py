from rtctoken import RtcTokenClient

TOKEN_SERVER_DOMAIN = "http://localhost:8080"
CHANNEL_NAME = "my-channel"
# 0 asks for a token any user can join with
USER_ID = 0


def run():
    client = RtcTokenClient(domain=TOKEN_SERVER_DOMAIN)

    result = client.get_token_result(channel_name=CHANNEL_NAME, user_id=USER_ID)

    if not result.ok:
        return

    print(result.token)


run()
