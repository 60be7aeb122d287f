# datahash

`datahash` computes a 64-bit rolling hash over records of byte values. The
records can come from a text file or from a length-prefixed binary file. The
package also provides a threaded version of the hasher, a scope timer, a
Julia-set renderer that writes PPM images, and a small `iota` checker.

## The hash

Each record starts at `104395301`. For every value `b` of the record the hash
is updated as follows:

    hash += (2654435789 * b) ^ (hash >> 23)

All arithmetic wraps at 64 bits, as for an unsigned 64-bit integer.

## Record formats

- **Text**: a count of records comes first. Each record is then its length
  followed by that many values, each in the range 0 to 65535. Everything is
  separated by whitespace.
- **Binary**: an 8-byte record count comes first. Each record is then an
  8-byte length followed by that many raw bytes. The integers are unsigned
  and little-endian.

Truncated data, non-integer tokens and out-of-range values raise `ValueError`.

## Library use

```python
from datahash.hashing import (
    hash_bytes,
    encode_binary_records,
    iter_binary_records,
    write_hashes,
)
from datahash.parallel import hash_records_parallel

blob = encode_binary_records([b"hello", b"world"])
serial = [hash_bytes(record) for record in iter_binary_records(blob)]
threaded = hash_records_parallel(blob, 4)
assert serial == threaded

write_hashes(serial, "hashes.txt")   # one decimal hash per line
```

`iter_text_records(stream)` yields the records of an open text stream.
`hash_text_file(path)` and `hash_binary_file(path)` hash every record in a
file. `hash_file_parallel(path, num_threads)` does the same job as
`hash_binary_file` but spreads the records over threads (8 by default). The
hashes it returns keep the record order. A thread count below 1 raises
`ValueError`.

### Timing a block

```python
from datahash.timer import ScopeTimer, Unit

with ScopeTimer("load data", Unit.MILLI):
    ...
```

When the block ends, the timer writes the message, the elapsed time to 15
significant digits and its unit suffix to the given stream, or to standard
error if none is given. `elapsed()` writes the same line at any time and
returns the value. The units are `Unit.SECONDS`, `Unit.MILLI`, `Unit.MICRO`
and `Unit.NANO` (the default). `time_block(unit, stream)` gives a timer whose
message is `[function:line]` of the caller.

### Julia set

```python
from datahash.julia import render, write_ppm

pixels = render(256, 256, 1000)
write_ppm(pixels, 256, 256, "julia.ppm")
```

`render` iterates `z*z + c` over the square from -2.1-2.1i to 2.1+2.1i and
returns a list of `Color` values row by row. A point that reaches the
iteration limit is black; every other point takes a colour from a 16-entry
palette chosen by its iteration count (`set_color`). `escape_iterations(c)`
gives the count for a single point. `write_ppm` writes a binary P6 image and
raises `ValueError` if the number of pixels does not match the size.

### iota

`iota(count, start=-6)` returns `count` consecutive integers from `start`.
`check_iota(values, start, num_checks)` checks evenly spaced positions from
position 6 onward, returns the positions it checked, and raises `ValueError`
at the first mismatch.

## Commands

- `datahash-hash INPUT [-f text|binary] [-o OUTPUT]` hashes a data file and
  writes one hash per line to `OUTPUT` (default `datahash.txt`). Without
  `-f`, files ending in `.txt` are read as text and others as binary.
- `datahash-parallel INPUT [THREADS] [-o OUTPUT] [--timed]` hashes a binary
  data file with `THREADS` worker threads (default 8) and writes the results
  to `OUTPUT` (default `hash-parallel.txt`). `--timed` reports timings in
  seconds on standard error.
- `datahash-julia [--width W] [--height H] [--max-iterations N] [-o OUTPUT]`
  renders the Julia set, 1024x1024 with 1000 iterations by default, to
  `julia.ppm`.
- `datahash-iota [COUNT]` fills a sequence of `COUNT` values (default one
  billion) and spot-checks it, exiting with status 1 on a mismatch.

## Tests

```
pip install -e .[test]
pytest
```