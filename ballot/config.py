CONTRACT_NAME = 'ballot'
PROPOSAL_NAME_LENGTH = 32

# State keys reported by the executor: ballot.proposals:<index>, ballot.voters:<identity>
PROPOSALS_KEY = 'proposals'
VOTERS_KEY = 'voters'
DELIMITER = ':'
