"""
Admin password hashing.
"""

from __future__ import annotations

import bcrypt

from core import config


class PasswordError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=config.bcrypt_rounds())).decode("utf-8")
