from .config import logger
from .utils.http_utils import fetch_text
import requests


class WordlistError(IOError):
    """The wordlist could not be read or fetched."""


def _parse_words(lines):
    # Order and duplicates are kept; only blank lines are dropped
    return [line.strip() for line in lines if line.strip()]


def load_wordlist(source, timeout=10):
    """
    Loads a wordlist from a local path or an http(s):// URL, one word per line.
    """
    if source.startswith(('http://', 'https://')):
        logger.info(f"[*] Fetching wordlist from {source}...")
        try:
            words = _parse_words(fetch_text(source, timeout=timeout).splitlines())
        except requests.exceptions.RequestException as e:
            raise WordlistError(f"Could not fetch wordlist from {source}: {e}") from e
    else:
        try:
            with open(source, 'r', encoding='utf-8', errors='replace') as f:
                words = _parse_words(f)
        except OSError as e:
            raise WordlistError(f"Could not read wordlist {source}: {e}") from e

    logger.info(f"Loaded {len(words)} words from {source}.")
    return words
