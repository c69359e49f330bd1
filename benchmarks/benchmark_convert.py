"""Benchmark lit2md conversion throughput and memory.

Run with:
    python benchmarks/benchmark_convert.py

The converter streams, so peak memory should stay flat as the input grows.
"""

import io
import time
import tracemalloc
from collections.abc import Iterator

from lit2md import ConvertConfig, convert_lines

CONFIG = ConvertConfig(comment_start="//", fence_label="go")


def generate_source(sections: int) -> Iterator[str]:
    """Yield a literate Go file one line at a time."""
    for i in range(sections):
        yield f"//] ## Section {i}\n"
        yield f"//] Function {i} returns its index.\n"
        yield "\n"
        yield f"func f{i}() int {{\n"
        yield f"\treturn {i}\n"
        yield "}\n"
        yield "\n"


class NullWriter(io.TextIOBase):
    def write(self, s: str) -> int:
        return len(s)


def benchmark_throughput(sections: int, iterations: int = 5) -> float:
    """Average seconds to convert ``sections`` sections."""
    convert_lines(generate_source(10), NullWriter(), CONFIG)  # Warmup

    start = time.perf_counter()
    for _ in range(iterations):
        convert_lines(generate_source(sections), NullWriter(), CONFIG)
    return (time.perf_counter() - start) / iterations


def measure_peak_memory(sections: int) -> int:
    """Peak traced memory in bytes while converting ``sections`` sections."""
    tracemalloc.start()
    try:
        convert_lines(generate_source(sections), NullWriter(), CONFIG)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return peak


def main() -> None:
    print(f"{'sections':>10} {'lines':>10} {'ms':>10} {'lines/s':>12} {'peak KiB':>10}")
    for sections in (1_000, 10_000, 100_000):
        lines = sections * 7
        elapsed = benchmark_throughput(sections, iterations=3)
        peak = measure_peak_memory(sections)
        print(
            f"{sections:>10} {lines:>10} {elapsed * 1000:>10.1f} "
            f"{lines / elapsed:>12.0f} {peak / 1024:>10.1f}"
        )


if __name__ == "__main__":
    main()
