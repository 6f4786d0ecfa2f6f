import os
from dotenv import load_dotenv

load_dotenv()


def verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def empty_token() -> str:
    token = os.getenv("REVERSI_EMPTY_TOKEN", ".")

    if len(token) != 1:
        raise ValueError(f'REVERSI_EMPTY_TOKEN must be one character, got "{token}"')

    return token
