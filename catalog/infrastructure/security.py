"""
Hachage des mots de passe par PBKDF2-HMAC-SHA256.

Format de l'empreinte : "pbkdf2_sha256$<iterations>$<sel hex>$<hash hex>".
Le nombre d'iterations est stocke dans l'empreinte, ce qui permet de
l'augmenter sans invalider les mots de passe existants.
"""

import hashlib
import hmac
import os

from catalog.core.ports.security import ISecretHasher

ALGORITHM = "pbkdf2_sha256"

# Taille du sel : 16 octets
SALT_SIZE = 16

DEFAULT_ITERATIONS = 100_000


class Pbkdf2SecretHasher(ISecretHasher):
    """
    Implementation PBKDF2 du port ISecretHasher.

    Un sel aleatoire est genere pour chaque empreinte ; la verification
    utilise une comparaison en temps constant.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        if iterations < 1:
            raise ValueError("iterations doit etre >= 1")
        self._iterations = iterations

    def hash(self, plain: str) -> str:
        salt = os.urandom(SALT_SIZE)
        digest = self._derive(plain, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, plain: str, hashed: str) -> bool:
        """Retourne False pour toute empreinte mal formee ou d'un autre algorithme."""
        try:
            algorithm, raw_iterations, salt_hex, digest_hex = hashed.split("$")
            iterations = int(raw_iterations)
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        return hmac.compare_digest(self._derive(plain, salt, iterations), expected)

    @staticmethod
    def _derive(plain: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", plain.encode("utf-8"), salt, iterations)
