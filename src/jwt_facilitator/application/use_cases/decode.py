from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...domain.exceptions import InvalidTokenError
from ...domain.ports import TokenCodec

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Read claims from a token WITHOUT checking signature or expiry.

    Useful for debugging and display only. Never base an authorization
    decision on the result.
    """

    codec: TokenCodec

    def execute(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        if not token:
            return None

        try:
            return dict(self.codec.decode_unverified(token))
        except InvalidTokenError as exc:
            logger.debug("Token could not be decoded: %s", exc)
            return None
