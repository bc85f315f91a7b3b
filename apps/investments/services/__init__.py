"""
Investments app services layer.

Services contain the proposal lifecycle: creating investments, recording
member votes and activating investments that reach the approval quorum.
"""

from .exceptions import (
    InvestmentsServiceError,
    NotFound,
    InvestmentNotFoundError,
    VoterNotFoundError,
    ValidationError,
    InvalidVoteError,
    InvalidInvestmentError,
    StorageError,
    VoteStorageError,
    ActivationStorageError,
)

from .investment_management import (
    create_investment,
    get_investment_by_id,
    list_investments,
    get_active_investments,
)

from .activation import (
    get_approval_threshold,
    required_approvals,
    evaluate_activation,
    get_vote_summary,
)

from .voting import (
    cast_vote,
    submit_vote,
    get_votes,
    get_vote_for_member,
)


__all__ = [
    # Exceptions
    'InvestmentsServiceError',
    'NotFound',
    'InvestmentNotFoundError',
    'VoterNotFoundError',
    'ValidationError',
    'InvalidVoteError',
    'InvalidInvestmentError',
    'StorageError',
    'VoteStorageError',
    'ActivationStorageError',

    # Investment Management
    'create_investment',
    'get_investment_by_id',
    'list_investments',
    'get_active_investments',

    # Activation
    'get_approval_threshold',
    'required_approvals',
    'evaluate_activation',
    'get_vote_summary',

    # Voting
    'cast_vote',
    'submit_vote',
    'get_votes',
    'get_vote_for_member',
]
