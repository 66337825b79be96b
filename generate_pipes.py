"""Generate synthetic connected pipe chains and export them as JSON.

Usage: python generate_pipes.py [count] [output.json]

The output is a JSON array of create payloads that can be POSTed to /pipes
one by one, or loaded with ``PipeStore.create_many``.
"""

import json
import sys
import time
from pathlib import Path

from pipe_measure import PipeStore, format_distance, generate_connected_pipes, pipe_length

DEFAULT_COUNT = 100_000
OUTPUT_JSON = Path(__file__).parent / "pipes.json"


def export_json(pipes: list[dict], path: Path) -> None:
    """Write pipe payloads to a JSON file."""
    with open(path, "w") as f:
        json.dump(pipes, f)
    print(f"JSON exported: {path}")


def main():
    try:
        count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_COUNT
    except ValueError:
        count = -1
    if count <= 0:
        print("Error: Please provide a valid positive number")
        print("Usage: python generate_pipes.py [count] [output.json]")
        sys.exit(1)
    output = Path(sys.argv[2]) if len(sys.argv) > 2 else OUTPUT_JSON

    print(f"Target: {count:,} pipes\n")
    started = time.perf_counter()

    store = PipeStore()
    pipes = store.create_many(generate_connected_pipes(count))

    duration = time.perf_counter() - started
    total_m = sum(pipe_length(p) for p in pipes)

    print(f"Pipes:         {store.count():,}")
    print(f"Total length:  {format_distance(total_m)}")
    print(f"Time taken:    {duration:.2f} s")
    print(f"Rate:          {int(count / duration) if duration else count:,} pipes/second")
    print()

    export_json([p.model_dump(by_alias=True) for p in pipes], output)


if __name__ == "__main__":
    main()
