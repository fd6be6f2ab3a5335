"""
Profiling script for pybst tree performance analysis.

This script profiles insert, lookup, removal and traversal workloads on
random and sorted input to show the cost of the missing rebalancing.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
import warnings
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from src.pybst.exceptions import DegenerateTreeWarning
from src.pybst.tree import OrderedTree


def create_keys(n_keys, shuffled=True):
    """Create n distinct integer keys, shuffled or ascending."""
    keys = np.arange(n_keys)
    if shuffled:
        np.random.seed(42)
        np.random.shuffle(keys)
    return [int(k) for k in keys]


def profile_random_inserts():
    """Profile inserting 20000 shuffled keys and looking each up."""
    keys = create_keys(20000)

    tree = OrderedTree(keys)
    for key in keys:
        tree.contains(key)


def profile_sorted_inserts():
    """Profile inserting 2000 ascending keys (degenerate chain)."""
    keys = create_keys(2000, shuffled=False)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DegenerateTreeWarning)
        tree = OrderedTree(keys)
    tree.height()


def profile_removals():
    """Profile removing half of 20000 shuffled keys."""
    keys = create_keys(20000)

    tree = OrderedTree(keys)
    for key in keys[::2]:
        tree.remove(key)


def profile_traversals():
    """Profile the four traversal orders on 20000 keys."""
    keys = create_keys(20000)

    tree = OrderedTree(keys)
    visit = lambda element: False
    tree.preorder(visit)
    tree.inorder(visit)
    tree.postorder(visit)
    tree.level_order(visit)
    tree.is_complete()


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(20)  # Top 20 functions

    print("\nTop 20 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("pybst Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Random Inserts (20000 keys)", profile_random_inserts),
        ("Sorted Inserts (2000 keys)", profile_sorted_inserts),
        ("Removals (10000 of 20000 keys)", profile_removals),
        ("Traversals (20000 keys)", profile_traversals),
    ]

    profilers = {}
    for name, func in scenarios:
        profilers[name] = benchmark_scenario(name, func)

    print("\n" + "="*60)
    print("Saving detailed profiles...")
    print("="*60)

    for name, profiler in profilers.items():
        filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '')}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
