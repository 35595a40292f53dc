from passlib.context import CryptContext

bcrypt_context = CryptContext(schemes=['bcrypt'], deprecated='auto')

# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def _truncate(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    return bcrypt_context.hash(_truncate(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password or not is_password_hash(hashed_password):
        return False
    return bcrypt_context.verify(_truncate(plain_password), hashed_password)


def is_password_hash(value: str) -> bool:
    """True when ``value`` already carries a hash format marker ($2b$...)."""
    return bcrypt_context.identify(value) is not None
