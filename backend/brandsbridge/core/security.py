import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 100000
SALT_BYTES = 16


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
    ).hex()


def hash_password(password: str) -> str:
    """Salted PBKDF2-SHA256, stored as ``salt$hexdigest``."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}${_derive(password, salt)}"


def verify_password(password: str, password_hash: str) -> bool:
    salt, sep, stored_hash = password_hash.partition("$")
    if not sep or not salt or not stored_hash:
        return False
    return hmac.compare_digest(_derive(password, salt), stored_hash)
