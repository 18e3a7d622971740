from datetime import datetime, timedelta, UTC
from typing import Optional

from jose import JWTError, jwt

from edusync.models import SessionRecord


def encode_session_cookie(record: SessionRecord, secret: str, algorithm: str = "HS256") -> str:
    """Sign the session id for the cookie. The server-side record stays authoritative."""
    expires_at = record.expires_at.replace(tzinfo=UTC)
    to_encode = {"sid": record.sid, "exp": expires_at}
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_session_cookie(token: str | None, secret: str, algorithm: str = "HS256") -> Optional[str]:
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None
    return payload.get("sid")


def cookie_max_age(ttl: timedelta) -> int:
    return int(ttl.total_seconds())


def seconds_until(moment: datetime) -> int:
    return max(0, int((moment.replace(tzinfo=UTC) - datetime.now(UTC)).total_seconds()))
