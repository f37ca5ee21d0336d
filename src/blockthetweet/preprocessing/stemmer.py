"""
Snowball stemmer integration.

Wraps the ``snowballstemmer`` port of libstemmer behind a small
``stem(word)`` contract. The stemmer applies no case folding of its own;
callers lowercase first. Stemmer objects keep the word being processed
as instance state, so every worker thread gets its own instance. The
configured language is validated once at construction so a bad language
fails at startup, not on the first request.
"""

import threading

import snowballstemmer
import structlog

from blockthetweet.preprocessing.exceptions import StemmerLoadError

logger = structlog.get_logger(__name__)


class Stemmer:
    """Language-parameterized, per-thread Snowball stemmer."""

    def __init__(self, language: str = "english"):
        """
        Initialize stemmer.

        Args:
            language: Snowball algorithm name (e.g. "english", "indonesian")

        Raises:
            StemmerLoadError: If there is no Snowball algorithm for ``language``
        """
        self.language = language.lower()
        if self.language not in snowballstemmer.algorithms():
            raise StemmerLoadError(
                f"No Snowball stemmer for language '{language}'",
                language=language,
            )

        self._local = threading.local()
        # Build the first instance eagerly so construction errors surface here
        self._instance()

        logger.info("Stemmer initialized", language=self.language)

    def _instance(self):
        stemmer = getattr(self._local, "stemmer", None)
        if stemmer is None:
            stemmer = snowballstemmer.stemmer(self.language)
            self._local.stemmer = stemmer
        return stemmer

    def stem(self, word: str) -> str:
        """Reduce ``word`` to its stem. Deterministic for a given language."""
        return self._instance().stemWord(word)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(language={self.language!r})"
