"""Multi-threaded hashing of binary record data."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Iterator
from contextlib import nullcontext
from pathlib import Path

from datahash.hashing import hash_bytes, iter_binary_records, write_hashes
from datahash.timer import ScopeTimer, Unit

DEFAULT_NUM_THREADS = 8


def hash_records_parallel(data: bytes, num_threads: int = DEFAULT_NUM_THREADS) -> list[int]:
    """Hash every record of binary data using a pool of worker threads.

    Workers take records one at a time from a shared reader, so the
    results come back in record order whatever the thread count.
    """
    if num_threads < 1:
        raise ValueError(f"number of threads must be at least 1, got {num_threads}")

    records: Iterator[tuple[int, bytes]] = enumerate(iter_binary_records(data))
    take_lock = threading.Lock()
    store_lock = threading.Lock()
    results: dict[int, int] = {}
    errors: list[Exception] = []

    def worker() -> None:
        while True:
            with take_lock:
                if errors:
                    return
                try:
                    index, record = next(records)
                except StopIteration:
                    return
                except ValueError as err:
                    errors.append(err)
                    return
            value = hash_bytes(record)
            with store_lock:
                results[index] = value

    threads = [threading.Thread(target=worker) for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if errors:
        raise errors[0]
    return [results[index] for index in range(len(results))]


def hash_file_parallel(path: str | Path, num_threads: int = DEFAULT_NUM_THREADS) -> list[int]:
    """Return the hash of every record in a binary data file, using threads."""
    return hash_records_parallel(Path(path).read_bytes(), num_threads)


def main(argv: list[str] | None = None) -> int:
    """Hash a binary data file with several threads and write the results."""
    parser = argparse.ArgumentParser(
        prog="datahash-parallel",
        description="Hash the records of a binary data file using threads.",
    )
    parser.add_argument("input", type=Path, help="binary data file to hash")
    parser.add_argument(
        "threads", nargs="?", type=int, default=DEFAULT_NUM_THREADS,
        help=f"number of worker threads (default: {DEFAULT_NUM_THREADS})",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("hash-parallel.txt"),
        help="file to write hashes to",
    )
    parser.add_argument(
        "--timed", action="store_true",
        help="report timings in seconds on standard error",
    )
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("number of threads must be at least 1")

    program_timer = (
        ScopeTimer("main program", Unit.SECONDS, sys.stderr) if args.timed else nullcontext()
    )
    with program_timer as timer:
        try:
            data = args.input.read_bytes()
            if timer is not None:
                timer.elapsed()
            hashes = hash_records_parallel(data, args.threads)
        except (OSError, ValueError) as err:
            parser.exit(1, f"datahash-parallel: {err}\n")

        output_timer = (
            ScopeTimer("results output", Unit.SECONDS, sys.stderr) if args.timed else nullcontext()
        )
        with output_timer:
            write_hashes(hashes, args.output)
    return 0