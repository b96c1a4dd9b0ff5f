"""
Identifier generation for usernames and referral codes.
"""

import secrets
import string

USERNAME_PREFIX = "user_"
USERNAME_WALLET_SUFFIX_LENGTH = 8
REFERRAL_CODE_LENGTH = 8

REFERRAL_CODE_ALPHABET = string.ascii_uppercase + string.digits
USERNAME_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def generate_username(wallet_address: str) -> str:
    """
    Build default username from wallet address.

    Format: user_<last 8 chars of wallet> (whole wallet if shorter).
    """
    return f"{USERNAME_PREFIX}{wallet_address[-USERNAME_WALLET_SUFFIX_LENGTH:]}"


def generate_referral_code(length: int = REFERRAL_CODE_LENGTH) -> str:
    """
    Generate a random referral code.

    Uppercase letters and digits. Uniqueness is not guaranteed here,
    callers must check the registry.
    """
    return "".join(secrets.choice(REFERRAL_CODE_ALPHABET) for _ in range(length))


def generate_username_suffix(length: int = 4) -> str:
    """Generate random lowercase suffix used to disambiguate usernames."""
    return "".join(secrets.choice(USERNAME_SUFFIX_ALPHABET) for _ in range(length))
