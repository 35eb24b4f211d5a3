import sys
import time
import requests
from utils import vlog


def read_words(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read().split()


def fetch_words(url, timeout=30):
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text.split()


def load_words(source):
    """Read a whitespace-delimited word stream from stdin ("-"), a URL or a file."""
    t0 = time.time()
    if source == "-":
        words = sys.stdin.read().split()
    elif source.startswith(("http://", "https://")):
        words = fetch_words(source)
    else:
        words = read_words(source)
    vlog(f"Loaded {len(words)} words from {source}", t0)
    return words
