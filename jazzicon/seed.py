"""Map arbitrary strings (public keys, conversation ids) to generator seeds."""
import hashlib
import logging
import re
from typing import Callable

logger = logging.getLogger(__name__)

FALLBACK_SEED = 1234
PREFIX_LENGTH = 12

_HEX_RE = re.compile(r"[0-9a-fA-F]+")

Digest = Callable[[str], str]


def md5_hexdigest(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def hexdigest_for(name: str) -> Digest:
    """Return a digest function for any algorithm hashlib knows by `name`."""
    hashlib.new(name)  # raises ValueError for unknown algorithms

    def _digest(text: str) -> str:
        h = hashlib.new(name, text.encode("utf-8"))
        # shake_* digests need an explicit length
        if name.startswith("shake_"):
            return h.hexdigest(32)
        return h.hexdigest()

    return _digest


def derive_seed(text: str, digest: Digest = md5_hexdigest) -> int:
    """Derive an integer seed from the first 12 hex chars of `digest(text)`.

    Never raises for a bad digest: a prefix that is not plain hex falls back
    to FALLBACK_SEED and logs a warning, so every such string shares one icon.
    """
    hex_digest = digest(text)
    prefix = hex_digest[:min(PREFIX_LENGTH, len(hex_digest))]
    if not _HEX_RE.fullmatch(prefix):
        logger.warning("Failed to derive identicon seed from %r (digest prefix %r), using %d",
                       text, prefix, FALLBACK_SEED)
        return FALLBACK_SEED
    return int(prefix, 16)
