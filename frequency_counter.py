import argparse
import time
import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog, log_run_to_file
from trie import Trie, EXTENDED_ASCII, SymbolRangeError
from wordlist import load_words


def count_frequencies(words, minlen, table=None):
    """Count words of length >= ``minlen`` into ``table``.

    Returns (table, words_counted, distinct, skipped); words with symbols
    outside the table's alphabet are skipped.
    """
    if table is None:
        table = Trie()
    counted = 0
    distinct = 0
    skipped = 0
    for word in words:
        if len(word) < minlen:
            continue
        try:
            seen = table.contains(word)
        except SymbolRangeError:
            skipped += 1
            continue
        counted += 1
        if seen:
            table.put(word, table.get(word) + 1)
        else:
            table.put(word, 1)
            distinct += 1
    return table, counted, distinct, skipped


def search_hits(words, table):
    """Return (hits, total) over every word of ``words`` present in ``table``."""
    hits = 0
    total = 0
    for word in words:
        try:
            if table.contains(word):
                hits += 1
                total += table.get(word)
        except SymbolRangeError:
            continue
    return hits, total


def most_frequent(table):
    best, best_count = "", 0
    for word in table.keys():
        count = table.get(word)
        if count > best_count:
            best, best_count = word, count
    return best, best_count


def run_counter(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the most frequent word longer than a threshold, using a trie symbol table"
    )
    parser.add_argument("minlen", type=int, help="Only count words with at least this many characters")
    parser.add_argument(
        "--source", type=str, default="-", help="Word list: a file path, an http(s) URL, or - for stdin (default: -)"
    )
    parser.add_argument("--radix", type=int, default=EXTENDED_ASCII, help="Alphabet size (default: 256)")
    parser.add_argument("--offset", type=int, default=0, help="Code of the first alphabet symbol (default: 0)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-run", action="store_true", help="Save the run summary to a dated JSON file in logs/")
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    try:
        words = load_words(args.source)
    except FileNotFoundError:
        log_with_time(f"Could not find word list: {args.source}", color=Fore.RED)
        raise SystemExit(1)
    except requests.RequestException as e:
        log_with_time(f"Error downloading word list: {e}", color=Fore.RED)
        raise SystemExit(1)
    except (OSError, UnicodeDecodeError) as e:
        log_with_time(f"Could not read word list {args.source}: {e}", color=Fore.RED)
        raise SystemExit(1)
    print(f"Input dictionary size = {len(words)}")

    log_with_time("Building the symbol table…")
    t0 = time.time()
    table, counted, distinct, skipped = count_frequencies(words, args.minlen, Trie(args.radix, args.offset))
    build_secs = utils.elapsed(t0)
    print(f"Time to build the symbol table: {build_secs:.3f} secs")
    if skipped:
        log_with_time(f"Skipped {skipped} words outside the alphabet", color=Fore.YELLOW)

    log_with_time("Running a search…")
    t0 = time.time()
    hits, total = search_hits(words, table)
    search_secs = utils.elapsed(t0)
    print(f"Search time: {search_secs:.3f} secs")
    print(f"Total search hits = {hits}")
    print(f"Sum of occurrence frequencies = {total}")

    t0 = time.time()
    best, best_count = most_frequent(table)
    vlog("Scanned keys for the most frequent word", t0)

    print()
    print(Fore.GREEN + f"{best} {best_count}" + Fore.RESET)
    print(f"distinct = {distinct}")
    print(f"Symbol table size = {table.size()}")
    print(f"words    = {counted}")

    summary = {
        "source": args.source,
        "minlen": args.minlen,
        "radix": args.radix,
        "offset": args.offset,
        "input_words": len(words),
        "words": counted,
        "distinct": distinct,
        "skipped": skipped,
        "size": table.size(),
        "search_hits": hits,
        "frequency_sum": total,
        "most_frequent": best,
        "most_frequent_count": best_count,
        "build_secs": round(build_secs, 3),
        "search_secs": round(search_secs, 3),
    }
    if args.log_run:
        log_run_to_file(summary)
    return summary


def main(argv=None):
    """Console entry point; the summary stays in ``run_counter``'s return value."""
    run_counter(argv)
