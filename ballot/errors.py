class BallotException(Exception):
    def __init__(self, *args):
        # Fall back to the canonical message for the error kind
        if len(args) == 0:
            args = (EXCEPTION_MAP.get(type(self), EXCEPTION_MAP[BallotException])['error'], )
        super().__init__(*args)


class Unauthorized(BallotException):
    pass


class AlreadyVoted(BallotException):
    pass


class AlreadyHasRights(BallotException):
    pass


class AlreadyDelegated(BallotException):
    pass


class InvalidProposal(BallotException):
    pass


class NoRightToVote(BallotException):
    pass


class SelfDelegation(BallotException):
    pass


class DelegationCycle(BallotException):
    pass


class ProposalNameInvalid(BallotException):
    pass


EXCEPTION_MAP = {
    Unauthorized: {'error': 'Only chairperson can give right to vote.'},
    AlreadyVoted: {'error': 'The voter already voted.'},
    AlreadyHasRights: {'error': 'The voter already has the right to vote.'},
    AlreadyDelegated: {'error': 'The voter already delegated their vote.'},
    InvalidProposal: {'error': 'Proposal index is out of range.'},
    NoRightToVote: {'error': 'Has no right to vote.'},
    SelfDelegation: {'error': 'Self-delegation is disallowed.'},
    DelegationCycle: {'error': 'Found loop in delegation.'},
    ProposalNameInvalid: {'error': 'Proposal names must be text of at most 32 bytes.'},
    BallotException: {'error': 'Another error has occured.'}
}
