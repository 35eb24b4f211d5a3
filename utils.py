# --- utils.py ---

import time
import json
from colorama import Fore, Style, init
import os

init()

VERBOSE = False
start_time = None

def elapsed(t0):
    return time.time() - t0

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    secs_total = elapsed(start_time)
    mins = int(secs_total // 60)
    secs = secs_total % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            log_with_time(f"{msg} (took {elapsed(t0):.3f}s)")
        else:
            log_with_time(msg)

def log_run_to_file(summary, log_dir='logs'):
    """Write a run summary to a dated JSON file in ``log_dir``.
    An existing file for the same day is kept under "previous" when it parses."""
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"frequency_{time.strftime('%Y-%m-%d')}.json")

    log_data = {"summary": summary}

    if os.path.exists(log_file):
        try:
            with open(log_file, 'r') as f:
                existing = json.load(f)
        except (OSError, ValueError):
            existing = None
        if isinstance(existing, dict) and "summary" in existing:
            log_data["previous"] = existing["summary"]

    with open(log_file, 'w') as f:
        json.dump(log_data, f, indent=2)
    log_with_time(f"Run logged to {log_file}", color=Fore.GREEN)
    return log_file
