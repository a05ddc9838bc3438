"""Fixed-length proposal name encoding.

Proposal names are stored on chain as ``bytes32``: UTF-8 text right padded
with NUL bytes. Formatting requires a NUL terminator, so at most 31 bytes of
text fit; parsing reads up to the first NUL.
"""
from ballot.config import PROPOSAL_NAME_LENGTH

NULL = b'\x00'


def format_bytes32_string(text: str) -> bytes:
    data = text.encode('utf-8')

    if len(data) > PROPOSAL_NAME_LENGTH - 1:
        raise ValueError('bytes32 string must be less than {} bytes'.format(PROPOSAL_NAME_LENGTH))

    return data.ljust(PROPOSAL_NAME_LENGTH, NULL)


def parse_bytes32_string(data: bytes) -> str:
    if len(data) != PROPOSAL_NAME_LENGTH:
        raise ValueError('invalid bytes32 - not {} bytes long'.format(PROPOSAL_NAME_LENGTH))

    if data[-1:] != NULL:
        raise ValueError('invalid bytes32 string - no null terminator')

    end = data.index(NULL)

    return data[:end].decode('utf-8')


def strip_bytes32(data: bytes) -> str:
    # Lenient decode: a name may fill all 32 bytes, otherwise it ends at the first NUL
    if len(data) != PROPOSAL_NAME_LENGTH:
        raise ValueError('invalid bytes32 - not {} bytes long'.format(PROPOSAL_NAME_LENGTH))

    end = data.find(NULL)
    if end != -1:
        data = data[:end]

    return data.decode('utf-8')
