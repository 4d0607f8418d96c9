"""Backup the JSON data file into ./backups."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from enrollment_system.config import get_settings_module
from enrollment_system.database.bootstrap import backup_data_file


def main(argv: list[str] | None = None) -> None:
    settings = importlib.import_module(get_settings_module())
    parser = argparse.ArgumentParser(description="Copy the data file into a timestamped backup.")
    parser.add_argument("--data-file", default=getattr(settings, "DATA_FILE", None) or "db.json")
    parser.add_argument("--out-dir", default=str(REPO_ROOT / "backups"))
    args = parser.parse_args(argv)

    try:
        out_file = backup_data_file(args.data_file, args.out_dir)
    except FileNotFoundError as e:
        raise SystemExit(str(e))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
