import os
import sys
import math
import logging

# Defaults for the command line (overridable there or via env vars)
DEFAULT_WORDLIST = "wordlist.txt"
DEFAULT_THREADS = 20
DEFAULT_TIMEOUT = 10

# Pause between a worker going idle and its quiescence check.
# Every termination decision hinges on this one value.
GRACE_PERIOD = 0.01

# Random probe label used for wildcard detection
WILDCARD_LABEL_LENGTH = 10
WILDCARD_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Sent with remote wordlist fetches
USER_AGENT = "recursub/0.1 (+wordlist fetch)"

logger = logging.getLogger("recursub")


class ConfigError(ValueError):
    """Invalid scan configuration, reported before any scanning starts."""


def setup_logging(verbose=False):
    # Findings own stdout, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def load_settings():
    """Reads optional overrides from the environment."""
    nameservers = [ns.strip() for ns in os.getenv('RECURSUB_NAMESERVERS', '').split(',') if ns.strip()]
    settings = {'nameservers': nameservers or None, 'grace_period': GRACE_PERIOD}

    raw_grace = os.getenv('RECURSUB_GRACE_PERIOD', '')
    if raw_grace:
        try:
            grace_period = float(raw_grace)
        except ValueError:
            grace_period = None
        if grace_period is None or not math.isfinite(grace_period) or grace_period < 0:
            logger.warning(f" [!] Ignoring invalid RECURSUB_GRACE_PERIOD value: {raw_grace!r}")
        else:
            settings['grace_period'] = grace_period
    return settings


def validate_domain(domain):
    normalized = (domain or '').strip().lower().rstrip('.')
    if not normalized:
        raise ConfigError("You must specify a domain")
    return normalized


def validate_settings(domain, threads, grace_period, max_depth):
    """Checks everything a scan needs before any wordlist is loaded. Returns the normalized domain."""
    normalized = validate_domain(domain)
    if threads < 1:
        raise ConfigError(f"Worker count must be at least 1 (got {threads})")
    if not math.isfinite(grace_period) or grace_period < 0:
        raise ConfigError(f"Grace period must be a finite number of seconds >= 0 (got {grace_period})")
    if max_depth < 0:
        raise ConfigError(f"Max depth cannot be negative (got {max_depth})")
    return normalized
