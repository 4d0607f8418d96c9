from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from enrollment_system.config import get_settings_module
from enrollment_system.database.bootstrap import init_data_file
from enrollment_system.database.store import JsonDocumentStore


def main(argv: list[str] | None = None) -> None:
    settings = importlib.import_module(get_settings_module())
    parser = argparse.ArgumentParser(description="Create the data file with the default accounts.")
    parser.add_argument("--data-file", default=getattr(settings, "DATA_FILE", None) or "db.json")
    parser.add_argument("--with-samples", action="store_true", help="also add sample courses and one enrollment")
    args = parser.parse_args(argv)

    store = JsonDocumentStore(args.data_file)
    seeded = init_data_file(store, with_samples=args.with_samples)
    print(f"OK: {args.data_file} ready (seeded: {', '.join(seeded) or 'nothing'})")


if __name__ == "__main__":
    main()
