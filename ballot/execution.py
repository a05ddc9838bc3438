from threading import Lock

from ballot.crypto.canonical import tx_hash_from_tx, state_hash, state_writes
from ballot.crypto.transaction import (
    TransactionException, EXCEPTION_MAP, check_tx_formatting, get_new_nonce
)
from ballot.engine import Ballot
from ballot.errors import BallotException
from ballot.logger.base import get_logger


class TransactionExecutor:
    def execute_tx(self, transaction):
        raise NotImplementedError

    def execute_tx_batch(self, transactions):
        raise NotImplementedError


class SerialExecutor(TransactionExecutor):
    """Hosts a single ballot and applies signed transactions to it one at a time.

    The sender of a transaction is the caller identity the ballot sees. A
    transaction that fails validation (format, signature, function, nonce) is
    rejected with a ``TransactionException`` and never reaches the ballot. A
    valid transaction always consumes its nonce; if the ballot refuses the
    call the output carries status 1 and no state writes.
    """
    def __init__(self, ballot: Ballot, strict=True):
        self.ballot = ballot
        self.strict = strict
        self.nonces = {}
        self.lock = Lock()
        self.log = get_logger('executor')

    @classmethod
    def deploy(cls, proposal_names: list, wallet, strict=True):
        ballot = Ballot(proposal_names, chairperson=wallet.verifying_key)
        return cls(ballot, strict=strict)

    def get_nonce(self, sender: str) -> int:
        return self.nonces.get(sender, 0)

    def validate_tx(self, transaction) -> int:
        check_tx_formatting(transaction)

        payload = transaction['payload']

        return get_new_nonce(
            tx_nonce=payload['nonce'],
            nonce=self.get_nonce(payload['sender']),
            strict=self.strict
        )

    def execute_tx(self, transaction):
        with self.lock:
            new_nonce = self.validate_tx(transaction)

            payload = transaction['payload']
            sender = payload['sender']

            self.nonces[sender] = new_nonce

            before = self.ballot.state()

            try:
                func = getattr(self.ballot, payload['function'])
                result = func(sender, **payload['kwargs'])
                status = 0
            except BallotException as e:
                result = e
                status = 1

            if status == 0:
                writes = state_writes(before, self.ballot.state())

                self.log.info(f'TX executed successfully. '
                              f'{len(writes)} writes. '
                              f'Result = {result}')
            else:
                writes = []

                self.log.error(f'TX executed unsuccessfully. '
                               f'{payload["function"]} by {sender} failed. '
                               f'Result = {result!r}')

            self.log.debug(writes)

            tx_output = {
                'hash': tx_hash_from_tx(transaction),
                'transaction': transaction,
                'status': status,
                'state': writes,
                'result': repr(result),
                'state_hash': state_hash(self.ballot.state())
            }

            return tx_output

    def execute_tx_batch(self, transactions):
        tx_data = []

        for transaction in transactions:
            try:
                tx_data.append(self.execute_tx(transaction))
            except TransactionException as e:
                error = EXCEPTION_MAP.get(type(e), EXCEPTION_MAP[TransactionException])['error']
                self.log.warning(f'Transaction rejected: {error}')

        return tx_data
