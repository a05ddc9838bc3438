import time

from ballot.crypto.canonical import encode
from ballot.crypto import wallet
from ballot.formatting import rules
from ballot.formatting.primatives import check_format


class TransactionException(Exception):
    pass


class TransactionSignatureInvalid(TransactionException):
    pass


class TransactionNonceInvalid(TransactionException):
    pass


class TransactionFunctionInvalid(TransactionException):
    pass


class TransactionFormattingError(TransactionException):
    pass


EXCEPTION_MAP = {
    TransactionNonceInvalid: {'error': 'Transaction nonce is invalid.'},
    TransactionSignatureInvalid: {'error': 'Transaction is not signed by the sender.'},
    TransactionFunctionInvalid: {'error': 'Transaction calls an unknown function or passes wrong arguments.'},
    TransactionFormattingError: {'error': 'Transaction is not formatted properly.'},
    TransactionException: {'error': 'Another error has occured.'}
}


def check_function(function: str, kwargs: dict):
    rule = rules.FUNCTION_RULES.get(function)

    if rule is None:
        raise TransactionFunctionInvalid

    if not check_format(kwargs, rule):
        raise TransactionFunctionInvalid


def check_tx_formatting(tx: dict):
    if not check_format(tx, rules.TRANSACTION_RULES):
        raise TransactionFormattingError

    payload = tx['payload']

    # Arguments are checked before anything is encoded for the signature
    check_function(payload['function'], payload['kwargs'])

    try:
        message = encode(payload)
    except (TypeError, ValueError):
        raise TransactionFormattingError

    if not wallet.verify(payload['sender'], message, tx['metadata']['signature']):
        raise TransactionSignatureInvalid


def get_new_nonce(tx_nonce: int, nonce: int, strict=True):
    if strict:
        if tx_nonce != nonce:
            raise TransactionNonceInvalid
    elif tx_nonce < nonce:
        raise TransactionNonceInvalid

    return tx_nonce + 1


def build_transaction(wallet, function: str, kwargs: dict, nonce: int):
    payload = {
        'function': function,
        'kwargs': kwargs,
        'nonce': nonce,
        'sender': wallet.verifying_key,
    }

    assert check_format(payload, rules.TRANSACTION_PAYLOAD_RULES), 'Invalid payload provided!'

    return {
        'payload': payload,
        'metadata': {
            'signature': wallet.sign(encode(payload)),
            'timestamp': int(time.time())
        }
    }


def give_right_to_vote_tx(wallet, voter: str, nonce: int):
    return build_transaction(wallet, 'give_right_to_vote', {'voter': voter}, nonce)


def vote_tx(wallet, proposal: int, nonce: int):
    return build_transaction(wallet, 'vote', {'proposal': proposal}, nonce)


def delegate_tx(wallet, to: str, nonce: int):
    return build_transaction(wallet, 'delegate', {'to': to}, nonce)
