"""Demo entrypoint exercising the sparse memory store."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from sparse_memory.src.core.grid import Grid
from sparse_memory.src.memory.memory_store import MemoryStore
from sparse_memory.src.utils import config_loader
from sparse_memory.src.utils.logger import set_debug


def run_demo(store: MemoryStore, *, sweep: bool = False) -> MemoryStore:
    """Populate ``store`` with the two example nodes and optionally sweep it."""
    store.set_matrix((0, 0, 0), [[1, 2, 3], [4, 5, 6]])
    store.set((0, 1, 2), 5, 3, 42)
    if sweep:
        store.update()
    return store


def print_store(store: MemoryStore) -> None:
    for summary in store.node_summaries():
        print(
            f"Node {summary.address}: {summary.rows}x{summary.cols}, "
            f"{summary.occupancy} non-zero"
        )
        Grid(store.get_all_data(summary.address)).visualize()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Populate and print a sparse memory store")
    parser.add_argument("--sweep", action="store_true", help="Run the placeholder update sweep")
    parser.add_argument("--config", type=Path, help="YAML or JSON file overriding runtime settings")
    parser.add_argument("--verbose", action="store_true", help="Log node creation and growth")
    parser.add_argument("--show-config", action="store_true", help="Print runtime configuration")
    args = parser.parse_args(argv)

    if args.config:
        overrides = config_loader.load_config(str(args.config))
        if "thread_safe" in overrides:
            config_loader.set_thread_safe(bool(overrides["thread_safe"]))
        if "growth_warning_cells" in overrides:
            config_loader.set_growth_warning_cells(int(overrides["growth_warning_cells"]))
        if "placeholder_update_value" in overrides:
            config_loader.set_placeholder_update_value(overrides["placeholder_update_value"])
        if "log_growth" in overrides:
            config_loader.set_log_growth(bool(overrides["log_growth"]))
    if args.verbose:
        set_debug("sparse_memory.src.memory.memory_store")
    if args.show_config:
        config_loader.print_runtime_config()

    store = run_demo(MemoryStore(), sweep=args.sweep)
    print_store(store)


if __name__ == "__main__":
    main()
