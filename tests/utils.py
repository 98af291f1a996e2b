from random import choices, randrange
import string


def get_random_str(k=10):
    return "".join(choices(string.ascii_uppercase + string.ascii_lowercase, k=k))


def get_random_channel_name():
    return get_random_str() + "-" + str(randrange(1000))


def get_random_user_id():
    return randrange(1, 2 ** 32)
