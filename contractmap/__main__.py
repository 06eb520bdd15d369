"""Run the demo against every implementation."""

import sys

from .demo import run


def main() -> int:
    results = run()
    for name, ok in results.items():
        print(f"{name}: {'ok' if ok else 'FAILED'}")
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
