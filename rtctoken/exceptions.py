class TokenClientException(Exception):
    pass


class TokenServerException(Exception):
    pass
