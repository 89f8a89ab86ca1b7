import base64
import hashlib
import secrets
from dataclasses import dataclass

from app.core.config import settings

KEY_SCHEME = "hg"
PREFIX_LEN = 8


@dataclass(frozen=True)
class ApiKeyParts:
    prefix: str
    plain: str
    hashed: str


def generate_api_key() -> ApiKeyParts:
    # hg_<prefix>_<secret>; only the hash is stored
    raw = secrets.token_urlsafe(32)
    prefix = raw[:PREFIX_LEN]
    plain = f"{KEY_SCHEME}_{prefix}_{raw}"
    return ApiKeyParts(prefix=prefix, plain=plain, hashed=hash_api_key(plain))


def key_prefix(plain: str) -> str | None:
    """Prefix of a well-formed key, None for anything else."""
    head = f"{KEY_SCHEME}_"
    # the prefix itself may contain "_", so cut by position rather than split
    if not plain.startswith(head) or len(plain) <= len(head) + PREFIX_LEN + 1:
        return None
    if plain[len(head) + PREFIX_LEN] != "_":
        return None
    return plain[len(head):len(head) + PREFIX_LEN]


def hash_api_key(plain: str) -> str:
    # Pepper protects against rainbow tables if DB leaks.
    salted = (plain + settings.api_key_pepper.get_secret_value()).encode("utf-8")
    digest = hashlib.sha256(salted).digest()
    return base64.b64encode(digest).decode("utf-8")


def verify_api_key(plain: str, hashed: str) -> bool:
    return secrets.compare_digest(hash_api_key(plain), hashed)
