from ballot.engine import (
    Ballot, Proposal, Voter,
    construct, give_right_to_vote, vote, delegate,
    winning_proposal, winner_name, get_proposal, get_voter
)

__version__ = '1.0.0'
