from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.db.model import Address, User


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """
    Fetch a user by email.

    :param db: Async database session.
    :param email: Email of the user.
    :return: User or None when there is no such user.
    :rtype: User | None
    """
    query = select(User).where(User.email == email)
    result = (await db.execute(query)).scalar_one_or_none()

    return result


async def create_new_user(db: AsyncSession, email: str, username: str, password_hash: str, creation_date: date) -> User:
    """
    Insert a user row.

    :param db: Async database session.
    :param email: Email, key of the user.
    :param username: User name.
    :param password_hash: Hashed password.
    :param creation_date: Registration date.
    :return: Created user.
    :rtype: User
    """
    user = User(email=email, username=username, password_hash=password_hash, creation_date=creation_date)
    db.add(user)
    await db.flush()

    return user


async def create_address(
    db: AsyncSession,
    email: str,
    country: str | None,
    street: str | None,
    city: str | None,
) -> Address:
    """
    Insert the address of a user.

    :param db: Async database session.
    :param email: Email of the owner.
    :param country: Country or None.
    :param street: Street or None.
    :param city: City or None.
    :return: Created address.
    :rtype: Address
    """
    address = Address(email=email, country=country, street=street, city=city)
    db.add(address)
    await db.flush()

    return address


async def update_user_password(user: User, password_hash: str, db: AsyncSession) -> User:
    """
    Replace the password hash of a user.

    :param user: User from the database.
    :param password_hash: New hashed password.
    :param db: Async database session.
    :return: Updated user.
    :rtype: User
    """
    user.password_hash = password_hash
    await db.flush()

    return user
