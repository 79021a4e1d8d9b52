"""
Token helpers built on the JWT_* settings.

No route requires a token yet; these exist so that authentication can be
added without changing the configuration surface.
"""
from datetime import datetime, timedelta, timezone
import re
from jose import jwt
from app.core.config import Settings, settings as default_settings
import logging

logger = logging.getLogger(__name__)

_UNITS = {"s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_expires_in(value: str) -> timedelta:
    """'30m' -> 30 minutes, '1h' -> 1 hour, '7d' -> 7 days, '90' -> 90 seconds"""
    match = re.fullmatch(r"\s*(\d+)\s*([smhd]?)\s*", value)
    if not match:
        raise ValueError(f"Invalid expiry: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_UNITS[unit or "s"]: int(amount)})


def create_access_token(
    subject: str | int,
    expires_delta: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    settings = settings or default_settings
    if expires_delta is None:
        expires_delta = parse_expires_in(settings.JWT_EXPIRES_IN)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(subject),
        "exp": now + expires_delta,
        "iat": now,
    }
    token = jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

    logger.debug(f"✅ JWT created: sub={subject}, exp={to_encode['exp']}")
    return token


def decode_access_token(token: str, settings: Settings | None = None) -> dict:
    settings = settings or default_settings
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
