import nacl
import nacl.encoding
import nacl.exceptions
import nacl.signing
import secrets


def verify(vk: str, msg: str, signature: str):
    try:
        vk = nacl.signing.VerifyKey(bytes.fromhex(vk))
        signature = bytes.fromhex(signature)
    except (ValueError, TypeError):
        return False

    try:
        vk.verify(msg.encode(), signature)
    except (nacl.exceptions.BadSignatureError, ValueError):
        return False
    return True


class Wallet:
    def __init__(self, seed=None):
        if isinstance(seed, str):
            seed = bytes.fromhex(seed)

        if seed is None:
            seed = secrets.token_bytes(32)

        self.sk = nacl.signing.SigningKey(seed=seed)
        self.vk = self.sk.verify_key

    @property
    def signing_key(self):
        return self.sk.encode().hex()

    @property
    def verifying_key(self):
        return self.vk.encode().hex()

    def sign(self, msg: str):
        sig = self.sk.sign(msg.encode())
        return sig.signature.hex()
