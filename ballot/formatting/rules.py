from ballot.formatting.primatives import (
    identity_is_formatted, signature_is_formatted, function_is_formatted, number_is_formatted, is_dict
)

# Ballot functions a transaction may call, with the rules for their kwargs.
# The sender is always the caller, so it never appears in kwargs.
FUNCTION_RULES = {
    'give_right_to_vote': {'voter': identity_is_formatted},
    'vote': {'proposal': number_is_formatted},
    'delegate': {'to': identity_is_formatted},
}

TRANSACTION_PAYLOAD_RULES = {
    'sender': identity_is_formatted,
    'nonce': number_is_formatted,
    'function': function_is_formatted,
    'kwargs': is_dict
}

TRANSACTION_METADATA_RULES = {
    'signature': signature_is_formatted,
    'timestamp': number_is_formatted
}

TRANSACTION_RULES = {
    'metadata': TRANSACTION_METADATA_RULES,
    'payload': TRANSACTION_PAYLOAD_RULES
}
