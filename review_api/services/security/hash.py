from pwdlib import PasswordHash

password_hash = PasswordHash.recommended()


def get_password_hash(password: str) -> str:
    """
    Hash a password with Argon2.

    :param password: Plain password.
    :return: Hashed password.
    :rtype: Str
    """
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plain password against the stored hash.

    :param plain_password: Password sent by the user.
    :param hashed_password: Hash from the database.
    :return: Whether the password matches.
    :rtype: Bool
    """
    return password_hash.verify(plain_password, hashed_password)
