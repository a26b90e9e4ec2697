import argparse
import sys
from .enumerator import SubdomainEnumerator
from .config import logger, setup_logging, load_settings, validate_settings, ConfigError, DEFAULT_WORDLIST, DEFAULT_THREADS, DEFAULT_TIMEOUT
from .wordlist import load_wordlist, WordlistError

def build_parser():
    parser = argparse.ArgumentParser(prog="recursub",
                                     description="Recursive DNS subdomain brute-forcer. Every subdomain found is expanded with the whole wordlist again.",
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("-d", "--domain", default="", help="The target domain (e.g., example.com)")
    parser.add_argument("-w", "--wordlist", default=DEFAULT_WORDLIST, help=f"Path or http(s) URL of the wordlist (default: {DEFAULT_WORDLIST}).")
    parser.add_argument("-t", "--threads", type=int, default=DEFAULT_THREADS, help=f"Number of concurrent threads (default: {DEFAULT_THREADS}).")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help=f"DNS and wordlist fetch timeout in seconds (default: {DEFAULT_TIMEOUT}).")
    parser.add_argument("--nameservers", help="Comma-separated nameserver IPs. Defaults to $RECURSUB_NAMESERVERS, then the system resolver.")
    parser.add_argument("--grace-period", type=float, help="Seconds an idle worker waits before checking for completion. "
                                                           "Defaults to $RECURSUB_GRACE_PERIOD or 0.01.")
    parser.add_argument("-r", "--max-depth", type=int, default=0, help="Maximum recursion depth (0 for unlimited, the default). "
                                                                       "Caution: unlimited recursion may not terminate on zones with many live hosts.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (display debug messages).")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    settings = load_settings()

    nameservers = settings['nameservers']
    if args.nameservers:
        nameservers = [ns.strip() for ns in args.nameservers.split(',') if ns.strip()]
    grace_period = args.grace_period if args.grace_period is not None else settings['grace_period']

    # Configuration errors are reported before the wordlist is touched
    try:
        validate_settings(args.domain, args.threads, grace_period, args.max_depth)
    except ConfigError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        wordlist = load_wordlist(args.wordlist, timeout=args.timeout)
    except WordlistError as e:
        logger.critical(f" [!] {e}")
        return 1

    try:
        enumerator = SubdomainEnumerator(
            domain=args.domain,
            wordlist=wordlist,
            threads=args.threads,
            timeout=args.timeout,
            nameservers=nameservers,
            grace_period=grace_period,
            max_depth=args.max_depth,
        )
        enumerator.run()
    except KeyboardInterrupt:
        logger.warning(" [!] Scan aborted by user.")
        return 130
    except Exception as e:
        logger.critical(f"An unhandled error occurred during enumeration: {e}", exc_info=True)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
