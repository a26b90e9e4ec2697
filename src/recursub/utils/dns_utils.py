from ..config import logger, WILDCARD_ALPHABET, WILDCARD_LABEL_LENGTH
from collections import namedtuple
import random
import dns.exception
import dns.resolver

# Outcomes of resolving one name
Found = namedtuple("Found", ["addresses"])
NotFound = namedtuple("NotFound", [])
ResolutionError = namedtuple("ResolutionError", ["reason"])

NOT_FOUND = NotFound()


def initialize_dns_resolver(timeout, nameservers=None):
    if nameservers:
        dns_resolver = dns.resolver.Resolver(configure=False)
        dns_resolver.nameservers = list(nameservers)
    else:
        dns_resolver = dns.resolver.Resolver()
    dns_resolver.timeout = timeout / 2
    dns_resolver.lifetime = timeout
    return dns_resolver


class DnsResolver:
    """
    Host lookup over dnspython: A and AAAA answers are merged into one
    address set. The wrapped resolver is never mutated after construction,
    so one instance can be shared by every worker thread.
    """

    def __init__(self, timeout=10, nameservers=None):
        self._resolver = initialize_dns_resolver(timeout, nameservers)

    def resolve(self, name):
        addresses = set()
        failure = None
        for rtype in ['A', 'AAAA']:
            try:
                answers = self._resolver.resolve(name, rtype)
                addresses.update(str(a) for a in answers)
            except dns.resolver.NXDOMAIN:
                break  # name does not exist, no point asking for AAAA
            except dns.resolver.NoAnswer:
                continue
            except dns.exception.DNSException as e:
                failure = f"{rtype} lookup failed: {e}"
                logger.debug(f"Error resolving {rtype} for {name}: {e}")

        if addresses:
            return Found(frozenset(addresses))
        if failure:
            return ResolutionError(failure)
        return NOT_FOUND


def random_label(length=WILDCARD_LABEL_LENGTH):
    return ''.join(random.choices(WILDCARD_ALPHABET, k=length))


def detect_wildcard(resolver, domain, length=WILDCARD_LABEL_LENGTH):
    """
    Resolves a random, almost certainly unregistered name under `domain`.
    Any answer means the zone has a catch-all record; its address set is
    returned as the signature used to suppress false positives. Returns
    None when there is no wildcard.

    Only the root domain is probed. A wildcard introduced further down the
    tree (say *.dev.example.com) is not detected, and names found below it
    may be false positives.
    """
    probe_name = f"{random_label(length)}.{domain}"
    outcome = resolver.resolve(probe_name)
    if isinstance(outcome, Found) and outcome.addresses:
        signature = frozenset(outcome.addresses)
        logger.warning(f" [!] Detected wildcard record for {domain}: {', '.join(sorted(signature))}. Matching answers will be filtered.")
        return signature
    if isinstance(outcome, ResolutionError):
        logger.warning(f" [!] Wildcard probe {probe_name} failed ({outcome.reason}). Continuing without wildcard filtering.")
    else:
        logger.debug(f" [.] No record for random subdomain {probe_name}. No wildcard detected.")
    return None


def is_wildcard_match(addresses, signature):
    # Exact set equality; a zone rotating its wildcard answer defeats this
    return bool(signature) and frozenset(addresses) == signature
