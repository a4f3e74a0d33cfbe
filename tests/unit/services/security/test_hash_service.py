from review_api.services.security.hash import get_password_hash, verify_password

######################### TESTS verify_password ########################


def test_verify_password_correct() -> None:
    """Correct password is accepted."""
    hashed_password = get_password_hash("password123")

    assert verify_password("password123", hashed_password) is True


def test_verify_password_incorrect() -> None:
    """Wrong password is rejected."""
    hashed_password = get_password_hash("password123")

    assert verify_password("wrongpassword", hashed_password) is False


######################### TESTS get_password_hash ########################


def test_get_password_hash() -> None:
    """Hash is a string that verifies against the password."""
    password = "password123"
    hashed = get_password_hash(password)

    assert isinstance(hashed, str)
    assert verify_password(password, hashed) is True


def test_get_password_hash_is_salted() -> None:
    """Two hashes of the same password differ."""
    assert get_password_hash("password123") != get_password_hash("password123")
