"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    MemberNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .member_directory import (
    eligible_members,
    count_eligible_members,
    list_members,
    get_member,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'MemberNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'eligible_members',
    'count_eligible_members',
    'list_members',
    'get_member',
]
