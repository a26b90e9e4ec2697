from .enumerator import SubdomainEnumerator
from .wordlist import load_wordlist

__version__ = "0.1.0"
