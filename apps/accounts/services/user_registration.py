"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


def register_user(
    *,
    username: str,
    email: str,
    password: str,
    first_name: str,
    last_name: str
) -> User:
    """
    Register a new member.

    Args:
        username: Login name (unique)
        email: Member's email address (unique)
        password: Member's password (will be hashed)
        first_name: Member's first name
        last_name: Member's last name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the username or email is already taken
    """
    if User.objects.filter(username=username).exists():
        raise UserRegistrationError("Username already exists")

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("Email already registered")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
            )
    except IntegrityError as e:
        # Lost a race against a concurrent registration
        raise UserRegistrationError("Username or email already registered") from e

    logger.info("Registered member %s", user.username)
    return user
