"""Canonical encodings for signing and hashing.

Payloads are signed over compact JSON with sorted keys, so the same ballot call
always produces the same bytes no matter how its dicts were built. Ballot
snapshots (``Ballot.state()``) go through the same encoding, which lets the
executor report a digest of the ballot after every transaction.
"""
import hashlib
import json


def encode(obj) -> str:
    return json.dumps(obj, sort_keys=True, separators=(',', ':'))


def sha3(s: str) -> str:
    return hashlib.sha3_256(s.encode()).hexdigest()


def tx_hash_from_tx(tx: dict) -> str:
    return sha3(encode(tx))


def state_hash(state: dict) -> str:
    return sha3(encode(state))


def state_writes(before: dict, after: dict) -> list:
    # Only keys whose snapshot changed, in key order
    return [{'key': k, 'value': v} for k, v in sorted(after.items()) if before.get(k) != v]
