from unittest import TestCase

from ballot.crypto.wallet import Wallet
from ballot.crypto.canonical import encode, tx_hash_from_tx, state_hash, state_writes
from ballot.engine import Ballot
from ballot.crypto import transaction
from ballot.formatting import rules
from ballot.formatting.primatives import check_format


class TestTransactionBuilder(TestCase):
    def setUp(self):
        self.wallet = Wallet()

    def test_build_transaction_is_formatted(self):
        tx = transaction.build_transaction(
            wallet=self.wallet,
            function='vote',
            kwargs={'proposal': 0},
            nonce=0
        )

        self.assertTrue(check_format(tx, rules.TRANSACTION_RULES))

    def test_build_transaction_signature_verifies(self):
        tx = transaction.build_transaction(
            wallet=self.wallet,
            function='delegate',
            kwargs={'to': Wallet().verifying_key},
            nonce=3
        )

        transaction.check_tx_formatting(tx)

    def test_tampered_payload_fails_signature(self):
        tx = transaction.build_transaction(
            wallet=self.wallet,
            function='vote',
            kwargs={'proposal': 0},
            nonce=0
        )

        tx['payload']['kwargs']['proposal'] = 1

        with self.assertRaises(transaction.TransactionSignatureInvalid):
            transaction.check_tx_formatting(tx)

    def test_other_sender_fails_signature(self):
        tx = transaction.build_transaction(
            wallet=self.wallet,
            function='vote',
            kwargs={'proposal': 0},
            nonce=0
        )

        tx['payload']['sender'] = Wallet().verifying_key

        with self.assertRaises(transaction.TransactionSignatureInvalid):
            transaction.check_tx_formatting(tx)

    def test_badly_formatted_fails(self):
        with self.assertRaises(transaction.TransactionFormattingError):
            transaction.check_tx_formatting({'payload': {}})

    def test_check_function_passes(self):
        transaction.check_function('give_right_to_vote', {'voter': 'a' * 64})

    def test_check_function_unknown_fails(self):
        with self.assertRaises(transaction.TransactionFunctionInvalid):
            transaction.check_function('winning_proposal', {})

    def test_check_function_wrong_kwargs_fails(self):
        with self.assertRaises(transaction.TransactionFunctionInvalid):
            transaction.check_function('vote', {'proposal': 0, 'extra': 1})

    def test_check_function_identity_not_vk_fails(self):
        with self.assertRaises(transaction.TransactionFunctionInvalid):
            transaction.check_function('delegate', {'to': {'not': 'hashable'}})

    def test_check_function_negative_proposal_fails(self):
        with self.assertRaises(transaction.TransactionFunctionInvalid):
            transaction.check_function('vote', {'proposal': -1})

    def test_strict_nonce(self):
        self.assertEqual(transaction.get_new_nonce(tx_nonce=2, nonce=2), 3)

        with self.assertRaises(transaction.TransactionNonceInvalid):
            transaction.get_new_nonce(tx_nonce=3, nonce=2)

    def test_non_strict_nonce_allows_gaps(self):
        self.assertEqual(transaction.get_new_nonce(tx_nonce=5, nonce=2, strict=False), 6)

        with self.assertRaises(transaction.TransactionNonceInvalid):
            transaction.get_new_nonce(tx_nonce=1, nonce=2, strict=False)

    def test_unencodable_kwargs_rejected_as_transaction_error(self):
        tx = transaction.give_right_to_vote_tx(self.wallet, voter=Wallet().verifying_key, nonce=0)
        tx['payload']['kwargs']['voter'] = b'\x01'

        with self.assertRaises(transaction.TransactionException):
            transaction.check_tx_formatting(tx)

    def test_uppercase_sender_rejected(self):
        tx = transaction.vote_tx(self.wallet, proposal=0, nonce=0)
        tx['payload']['sender'] = self.wallet.verifying_key.upper()

        with self.assertRaises(transaction.TransactionFormattingError):
            transaction.check_tx_formatting(tx)

    def test_ballot_builders(self):
        to = Wallet().verifying_key

        tx = transaction.delegate_tx(self.wallet, to=to, nonce=4)

        self.assertEqual(tx['payload']['function'], 'delegate')
        self.assertEqual(tx['payload']['kwargs'], {'to': to})
        self.assertEqual(tx['payload']['nonce'], 4)
        transaction.check_tx_formatting(tx)

        self.assertEqual(transaction.vote_tx(self.wallet, proposal=2, nonce=0)['payload']['kwargs'], {'proposal': 2})


class TestCanonical(TestCase):
    def test_encode_is_independent_of_key_order(self):
        self.assertEqual(encode({'b': 1, 'a': {'d': 1, 'c': 2}}), '{"a":{"c":2,"d":1},"b":1}')

    def test_hash_independent_of_key_order(self):
        a = {'payload': {'x': 1, 'y': 2}, 'metadata': {}}
        b = {'metadata': {}, 'payload': {'y': 2, 'x': 1}}

        self.assertEqual(tx_hash_from_tx(a), tx_hash_from_tx(b))
        self.assertEqual(len(tx_hash_from_tx(a)), 64)

    def test_state_writes_only_changed_keys(self):
        ballot = Ballot(['Yes', 'No'], chairperson='a' * 64)

        before = ballot.state()
        ballot.vote('a' * 64, 1)
        writes = state_writes(before, ballot.state())

        self.assertEqual([w['key'] for w in writes], ['ballot.proposals:1', 'ballot.voters:' + 'a' * 64])
        self.assertEqual(writes[0]['value'], {'name': 'No', 'vote_count': 1})

    def test_state_hash_follows_ballot(self):
        ballot = Ballot(['Yes', 'No'], chairperson='a' * 64)

        h = state_hash(ballot.state())
        self.assertEqual(h, state_hash(Ballot(['Yes', 'No'], chairperson='a' * 64).state()))

        ballot.vote('a' * 64, 0)
        self.assertNotEqual(h, state_hash(ballot.state()))
