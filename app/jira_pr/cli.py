from __future__ import annotations

import sys
from typing import Optional, Sequence

from .config import load_config
from .errors import PRGenError
from .pipeline import run_pipeline


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = load_config(argv)
        print("🎆 JIRA PR Generator Starting...")
        print("=" * 50)
        print(f"🎫 Processing ticket: {config.issue_key}\n")
        run_pipeline(config)
    except PRGenError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user", file=sys.stderr)
        return 130
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
