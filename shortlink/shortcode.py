"""Short code generation utilities."""

import hashlib
import re
from datetime import datetime
from typing import Callable, Optional, Tuple

from .errors import InternalError
from .common.validators import NotificationType


class ShortCodeGenerator:
    """Derive short codes from a salted SHA-256 digest.

    The salt is ``username + timestamp + notification type name``. The original
    URL is not part of it, so two submissions of the same URL by the same user
    at different instants produce different codes.
    """

    # Bytes of digest kept; each renders as two hex characters
    DIGEST_BYTES = 6
    CODE_LENGTH = DIGEST_BYTES * 2

    _CODE_RE = re.compile(r"^[0-9a-f]{%d}$" % CODE_LENGTH)

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Initialize short code generator.

        Args:
            clock: Callable returning the current time (defaults to datetime.now)
        """
        self.clock = clock or datetime.now

    @staticmethod
    def build_salt(
        username: str,
        notification_type: NotificationType,
        now: datetime,
    ) -> str:
        """Build the salt string hashed into a short code.

        Args:
            username: Submitting user
            notification_type: Canonical notification type
            now: Timestamp, serialized as ISO-8601 with microseconds

        Returns:
            Salt string
        """
        return f"{username}{now.isoformat(timespec='microseconds')}{notification_type.name}"

    def generate(self, salt: str) -> str:
        """Generate a short code from a salt.

        Args:
            salt: The exact input to hash

        Returns:
            12 lowercase hex characters

        Raises:
            InternalError: If the digest cannot be computed
        """
        try:
            # Unencodable characters (lone surrogates) hash as "?"
            digest = hashlib.sha256(salt.encode("utf-8", "replace")).digest()
        except ValueError as e:
            raise InternalError(f"Error during shortCode generation! Details: {e}") from e

        return "".join(f"{b:02x}" for b in digest[:self.DIGEST_BYTES])

    def generate_for(
        self,
        username: str,
        notification_type: NotificationType,
    ) -> Tuple[str, str, datetime]:
        """Generate a short code for a submission at the current time.

        Returns:
            Tuple of (short_code, salt, created_at)
        """
        now = self.clock()
        salt = self.build_salt(username, notification_type, now)
        return self.generate(salt), salt, now

    @classmethod
    def is_valid_format(cls, code: str) -> bool:
        """Check if code has the generated format (12 lowercase hex chars)."""
        return isinstance(code, str) and cls._CODE_RE.match(code) is not None
