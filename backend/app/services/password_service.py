"""One-way password hashing with bcrypt."""
import bcrypt

BCRYPT_ROUNDS = 10
# bcrypt only reads the first 72 bytes; newer releases reject longer input outright.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash with a fresh random salt; the salt and cost are embedded in the returned string."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str | None, hashed: str | None) -> bool:
    if password is None or not hashed:
        return False
    return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
