"""In-memory ballot with delegation.

A ``Ballot`` owns an ordered, fixed list of proposals and a lazily populated
mapping of identities to voter records. The chairperson (the creator) hands out
voting rights; voters either vote for a proposal or delegate their weight to
another voter. Every operation validates fully before it mutates anything, so
a failed call leaves the ballot exactly as it was.

Identities are opaque hashable values. The executor uses hex verifying keys.
"""
from ballot import errors
from ballot.config import CONTRACT_NAME, PROPOSALS_KEY, VOTERS_KEY, DELIMITER, PROPOSAL_NAME_LENGTH
from ballot.formatting.bytes32 import strip_bytes32


class Proposal:
    def __init__(self, name: str, vote_count: int=0):
        self._name = name
        self.vote_count = vote_count

    @property
    def name(self):
        return self._name

    def copy(self):
        return Proposal(self._name, self.vote_count)

    def to_dict(self):
        return {
            'name': self._name,
            'vote_count': self.vote_count
        }

    def __eq__(self, other):
        if not isinstance(other, Proposal):
            return NotImplemented
        return self._name == other.name and self.vote_count == other.vote_count

    def __repr__(self):
        return 'Proposal(name={!r}, vote_count={})'.format(self._name, self.vote_count)


class Voter:
    def __init__(self, weight: int=0, voted: bool=False, delegate=None, vote: int=None):
        self.weight = weight
        self.voted = voted
        self.delegate = delegate
        self.vote = vote

    def copy(self):
        return Voter(weight=self.weight, voted=self.voted, delegate=self.delegate, vote=self.vote)

    def to_dict(self):
        return {
            'weight': self.weight,
            'voted': self.voted,
            'delegate': self.delegate,
            'vote': self.vote
        }

    def __eq__(self, other):
        if not isinstance(other, Voter):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return 'Voter(weight={}, voted={}, delegate={!r}, vote={!r})'.format(
            self.weight, self.voted, self.delegate, self.vote
        )


def proposal_name(name) -> str:
    if isinstance(name, (bytes, bytearray)):
        try:
            name = strip_bytes32(bytes(name))
        except (ValueError, UnicodeDecodeError):
            raise errors.ProposalNameInvalid

    if type(name) != str:
        raise errors.ProposalNameInvalid

    if len(name.encode('utf-8')) > PROPOSAL_NAME_LENGTH:
        raise errors.ProposalNameInvalid

    return name


class Ballot:
    def __init__(self, proposal_names: list, chairperson):
        names = [proposal_name(name) for name in proposal_names]

        if len(names) == 0:
            raise errors.ProposalNameInvalid('A ballot needs at least one proposal.')

        self._proposals = [Proposal(name) for name in names]
        self._chairperson = chairperson
        self._voters = {
            chairperson: Voter(weight=1)
        }

    @property
    def chairperson(self):
        return self._chairperson

    @property
    def proposal_count(self):
        return len(self._proposals)

    # Lazily creates a record with default values on first mutation
    def _voter(self, identity) -> Voter:
        voter = self._voters.get(identity)
        if voter is None:
            voter = Voter()
            self._voters[identity] = voter
        return voter

    def _peek(self, identity) -> Voter:
        voter = self._voters.get(identity)
        if voter is None:
            return Voter()
        return voter

    def _check_proposal(self, index):
        if type(index) != int or not 0 <= index < len(self._proposals):
            raise errors.InvalidProposal

    def give_right_to_vote(self, caller, voter):
        if caller != self._chairperson:
            raise errors.Unauthorized

        grantee = self._peek(voter)

        if grantee.voted:
            raise errors.AlreadyVoted

        if grantee.delegate is not None:
            raise errors.AlreadyDelegated

        if grantee.weight != 0:
            raise errors.AlreadyHasRights

        self._voter(voter).weight = 1

    def vote(self, caller, proposal: int):
        self._check_proposal(proposal)

        sender = self._peek(caller)

        if sender.voted:
            raise errors.AlreadyVoted

        if sender.delegate is not None:
            raise errors.AlreadyDelegated

        if sender.weight == 0:
            raise errors.NoRightToVote

        sender.voted = True
        sender.vote = proposal
        self._proposals[proposal].vote_count += sender.weight

    def resolve_delegate(self, caller, to):
        """Follows the delegation chain starting at ``to``.

        Returns the last identity of the chain, the one that holds the weight.
        Raises ``DelegationCycle`` if the walk comes back to ``caller`` or to
        any identity already seen.
        """
        seen = {caller}
        current = to

        while True:
            if current in seen:
                raise errors.DelegationCycle

            seen.add(current)

            voter = self._voters.get(current)
            if voter is None or voter.delegate is None:
                return current

            current = voter.delegate

    def delegate(self, caller, to):
        if caller == to:
            raise errors.SelfDelegation

        sender = self._peek(caller)

        if sender.voted:
            raise errors.AlreadyVoted

        if sender.delegate is not None:
            raise errors.AlreadyDelegated

        if sender.weight == 0:
            raise errors.NoRightToVote

        resolved = self.resolve_delegate(caller, to)

        delegate_ = self._voter(resolved)

        weight = sender.weight
        sender.weight = 0
        sender.delegate = to

        if delegate_.voted:
            # Delegate already voted, so the weight goes straight to the tally
            self._proposals[delegate_.vote].vote_count += weight
            sender.voted = True
            sender.vote = delegate_.vote
        else:
            delegate_.weight += weight

    def winning_proposal(self) -> int:
        winning = 0
        winning_count = 0

        for i, proposal in enumerate(self._proposals):
            if proposal.vote_count > winning_count:
                winning_count = proposal.vote_count
                winning = i

        return winning

    def winner_name(self) -> str:
        return self._proposals[self.winning_proposal()].name

    def get_proposal(self, index: int) -> Proposal:
        self._check_proposal(index)
        return self._proposals[index].copy()

    def get_voter(self, identity) -> Voter:
        return self._peek(identity).copy()

    def proposals(self):
        return [p.copy() for p in self._proposals]

    def total_votes(self) -> int:
        return sum(p.vote_count for p in self._proposals)

    def state(self) -> dict:
        s = {}

        for i, proposal in enumerate(self._proposals):
            key = DELIMITER.join(['{}.{}'.format(CONTRACT_NAME, PROPOSALS_KEY), str(i)])
            s[key] = proposal.to_dict()

        for identity, voter in self._voters.items():
            key = DELIMITER.join(['{}.{}'.format(CONTRACT_NAME, VOTERS_KEY), str(identity)])
            s[key] = voter.to_dict()

        return s


def construct(proposal_names: list, creator) -> Ballot:
    return Ballot(proposal_names, chairperson=creator)


def give_right_to_vote(ballot: Ballot, caller, grantee):
    ballot.give_right_to_vote(caller, grantee)


def vote(ballot: Ballot, caller, proposal_index: int):
    ballot.vote(caller, proposal_index)


def delegate(ballot: Ballot, caller, target):
    ballot.delegate(caller, target)


def winning_proposal(ballot: Ballot) -> int:
    return ballot.winning_proposal()


def winner_name(ballot: Ballot) -> str:
    return ballot.winner_name()


def get_proposal(ballot: Ballot, index: int) -> Proposal:
    return ballot.get_proposal(index)


def get_voter(ballot: Ballot, identity) -> Voter:
    return ballot.get_voter(identity)
