class TokenClient:
    def get_token(self, channel_name: str, user_id: int = 0) -> str:
        raise NotImplementedError
