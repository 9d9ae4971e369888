# rowing_history/main.py
from __future__ import annotations
from pathlib import Path
import logging
import sys
import yaml

from .core.errors import RowingHistoryError
from .core.pipeline import modes_from_config, run_pipeline
from .utils.detect import discover_inputs

here = Path(__file__).resolve().parent


def load_config(cfg_path: Path) -> dict:
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_data_root(cfg: dict, cfg_path: Path) -> Path:
    root = Path(str((cfg.get("data", {}) or {}).get("root", "Data")))
    if not root.is_absolute():
        root = cfg_path.parent / root
    return root.resolve()


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    # ---------- config ----------
    cfg_path = Path(argv[0]).resolve() if argv else here / "config.yaml"
    cfg = load_config(cfg_path)

    verbose = bool((cfg.get("logging", {}) or {}).get("verbose", True))
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    data_root = resolve_data_root(cfg, cfg_path)
    modes = modes_from_config(cfg)
    if not modes:
        print(f"[INFO] No modes configured in {cfg_path}")
        sys.exit(0)
    if verbose:
        print(f"[cfg] config={cfg_path}")
        print(f"[cfg] data={data_root}")

    # ---------- menu loop ----------
    while True:
        print("There are various input files, from which you select one: ")
        for item in discover_inputs(data_root, modes):
            missing = "" if item.exists else "  (missing)"
            print(f"{item.mode.key}: {item.mode.label}{missing}")
        print("x: exit")
        try:
            choice = input().strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if choice.lower() == "x":
            break
        mode = modes.get(choice)
        if mode is None:
            print("Your selection was incorrect, try again")
            continue

        try:
            result = run_pipeline(mode, cfg, data_root)
        except (OSError, RowingHistoryError, ValueError) as e:
            print(f"[WARN] run '{mode.key}' abandoned: {e}")
        else:
            print("Distances (meters):")
            for line in result.store.serialize("distance"):
                print(f"{line}, m")
            print("\nDurations (minutes):")
            for line in result.store.serialize("duration"):
                print(f"{line}, min")

        try:
            input("\nPress Enter to continue...")
        except (EOFError, KeyboardInterrupt):
            print()
            break


if __name__ == "__main__":
    main()
