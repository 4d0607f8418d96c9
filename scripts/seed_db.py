from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from enrollment_system.config import get_settings_module
from enrollment_system.database.bootstrap import ensure_default_users, ensure_sample_data
from enrollment_system.database.store import JsonDocumentStore


def main(argv: list[str] | None = None) -> None:
    settings = importlib.import_module(get_settings_module())
    parser = argparse.ArgumentParser(description="Add sample courses and one enrollment to empty collections.")
    parser.add_argument("--data-file", default=getattr(settings, "DATA_FILE", None) or "db.json")
    args = parser.parse_args(argv)

    store = JsonDocumentStore(args.data_file)
    ensure_default_users(store)
    seeded = ensure_sample_data(store)
    print(f"OK: Seeded {args.data_file} ({', '.join(seeded) or 'already populated'})")


if __name__ == "__main__":
    main()
