"""
Content fingerprinting.

XXH64 over the UTF-8 bytes of the raw text, with a fixed seed so that the
same text hashes identically across restarts. Used only as an opaque
identity tag: not cryptographic, collisions are tolerated.
"""

import xxhash


class ContentHasher:
    """Deterministic 64-bit fingerprint of raw text."""
    
    def __init__(self, seed: int = 0):
        self.seed = seed
    
    def hash(self, text: str) -> int:
        # surrogatepass: JSON bodies may carry lone surrogates
        return xxhash.xxh64_intdigest(text.encode("utf-8", "surrogatepass"), seed=self.seed)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self.seed})"
