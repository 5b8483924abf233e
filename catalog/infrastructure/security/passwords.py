from catalog.domain.services import IPasswordHasher
from catalog.common.config import Config
import bcrypt

__all__ = ['BCryptHasher']


class BCryptHasher(IPasswordHasher):
    def __init__(self, rounds: int | None = None):
        self.rounds = rounds or Config.BCRYPT_ROUNDS

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        #checkpw compares in constant time
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            return False
