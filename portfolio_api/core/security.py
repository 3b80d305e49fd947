# portfolio_api/core/security.py
import hashlib
import hmac
import time
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone

from jose import jwt

ALGORITHM = "HS256"
ADMIN_SUBJECT = "admin"


def hash_password(password: str) -> str:
    """Hex SHA-256 digest of a password, the format of ADMIN_PASSWORD_HASH."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_admin_password(password: str, expected_hash: Optional[str]) -> bool:
    """
    Compare the hash of a candidate password with the configured admin hash.
    No configured hash means nobody can log in.
    """
    if not expected_hash:
        return False
    return hmac.compare_digest(hash_password(password), expected_hash.lower())


def generate_session_token() -> str:
    """Opaque session token derived from the current time."""
    return hashlib.sha256(str(time.time_ns()).encode("utf-8")).hexdigest()


def create_access_token(secret_key: str, expires_minutes: int, subject: str = ADMIN_SUBJECT) -> str:
    """
    Create a signed token for the admin.
    Format: JWT (HS256) with "sub" and "exp" claims
    """
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    return jwt.encode({"sub": subject, "exp": expire}, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> Dict[str, Any]:
    """Verify signature and expiry; raises jose.JWTError on failure."""
    return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
