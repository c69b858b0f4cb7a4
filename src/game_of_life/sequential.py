"""
Conway's Game of Life - terminal runner and benchmark

Usage: game-of-life [rows] [cols] [generations] [visualize] [pattern]
       game-of-life --benchmark
"""

import sys
import time

from .patterns import PATTERNS, make_pattern
from .simulation import Simulation

ENGINES = ("two_phase", "numpy")
BENCHMARK_SIZES = [16, 32, 64, 128]
BENCHMARK_CSV = "benchmark_sequential.csv"
CSV_HEADER = "engine,size,generations,total_time_ms,time_per_generation_ms,cells_per_second_million"

USAGE = "Usage: game-of-life [rows] [cols] [generations] [visualize] [pattern] | --benchmark"


def run_generations(sim: Simulation, generations: int, use_numpy: bool = False) -> float:
    """Step the simulation and return the elapsed time in ms."""
    step_func = sim.step_numpy if use_numpy else sim.step

    start_time = time.perf_counter()
    for _ in range(generations):
        step_func()
    return (time.perf_counter() - start_time) * 1000


def _throughput(rows: int, cols: int, generations: int, elapsed_ms: float) -> float:
    if elapsed_ms <= 0:
        return 0.0
    return rows * cols * generations / elapsed_ms / 1000


def run_simulation(rows: int, cols: int, generations: int,
                   visualize: bool = False, use_numpy: bool = False,
                   seed: int | None = 42, pattern: str = "random") -> dict:
    """
    Run the Game of Life simulation.

    Args:
        rows: Grid height
        cols: Grid width
        generations: Number of generations to simulate
        visualize: Whether to print each generation
        use_numpy: Use the vectorized NumPy step instead of the two-phase step
        seed: Random seed for reproducibility
        pattern: Name of the seed pattern

    Returns:
        Dictionary with timing and statistics
    """
    sim = Simulation(rows, cols, make_pattern(pattern, rows, cols, seed=seed))
    engine = ENGINES[1] if use_numpy else ENGINES[0]

    print("Game of Life Sequential Python Implementation")
    print(f"Grid size: {rows} x {cols}")
    print(f"Generations: {generations}")
    print(f"Pattern: {pattern}")
    print(f"Using {'NumPy vectorized' if use_numpy else 'two-phase'} step")
    print()

    initial_live = sim.count_live_cells()
    print(f"Initial live cells: {initial_live}")

    show = visualize and rows <= 40 and cols <= 80
    if show:
        print("\033[2J", end="")  # Clear screen
        print("\033[H", end="")
        sim.print_status()

        elapsed_ms = 0.0
        for _ in range(generations):
            elapsed_ms += run_generations(sim, 1, use_numpy=use_numpy)
            print("\033[H", end="")  # Move cursor to home position
            sim.print_status()
            time.sleep(0.1)
    else:
        elapsed_ms = run_generations(sim, generations, use_numpy=use_numpy)

    final_live = sim.count_live_cells()
    per_generation = elapsed_ms / generations if generations else 0.0
    throughput = _throughput(rows, cols, generations, elapsed_ms)

    print("\nSimulation complete!")
    print(f"Final live cells: {final_live}")
    print(f"Any cell alive? {'true' if sim.is_any_cell_alive() else 'false'}")
    print(f"Total time: {elapsed_ms:.2f} ms")
    print(f"Time per generation: {per_generation:.4f} ms")
    print(f"Cells processed per second: {throughput:.2f} million")

    return {
        "rows": rows,
        "cols": cols,
        "generations": sim.get_generation(),
        "engine": engine,
        "initial_live_cells": initial_live,
        "final_live_cells": final_live,
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": per_generation,
        "cells_per_second_million": throughput,
    }


def benchmark(sizes: list[int] | None = None, generations: int = 20, seed: int = 42,
              csv_file: str | None = BENCHMARK_CSV) -> list[dict]:
    """
    Time both engines over square grids of the given sizes.

    Args:
        sizes: List of grid sizes to test
        generations: Number of generations per test
        seed: Random seed for reproducibility
        csv_file: Where to write the results, or None to skip writing
    """
    if sizes is None:
        sizes = BENCHMARK_SIZES

    print("=" * 72)
    print("BENCHMARK: Two-phase vs NumPy Game of Life")
    print("=" * 72)
    print()

    results = []

    for size in sizes:
        for engine in ENGINES:
            sim = Simulation(size, size, make_pattern("random", size, size, seed=seed))
            elapsed_ms = run_generations(sim, generations, use_numpy=(engine == "numpy"))

            results.append({
                "engine": engine,
                "size": size,
                "generations": generations,
                "total_time_ms": elapsed_ms,
                "time_per_generation_ms": elapsed_ms / generations if generations else 0.0,
                "cells_per_second_million": _throughput(size, size, generations, elapsed_ms),
            })
            print(f"Size {size:>5}x{size:<5} {engine:>10} done: {elapsed_ms:>10.2f} ms")

    # Summary table
    print("\n" + "=" * 72)
    print("SUMMARY")
    print("=" * 72)
    print(f"{'Size':>10} | {'Engine':>10} | {'Total (ms)':>12} | {'Per Gen (ms)':>14} | {'M cells/s':>10}")
    print("-" * 72)
    for r in results:
        print(f"{r['size']:>10} | {r['engine']:>10} | {r['total_time_ms']:>12.2f} | "
              f"{r['time_per_generation_ms']:>14.4f} | {r['cells_per_second_million']:>10.2f}")
    print("=" * 72)

    if csv_file:
        with open(csv_file, "w") as f:
            f.write(CSV_HEADER + "\n")
            for r in results:
                f.write(f"{r['engine']},{r['size']},{r['generations']},{r['total_time_ms']:.4f},"
                        f"{r['time_per_generation_ms']:.6f},{r['cells_per_second_million']:.4f}\n")
        print(f"\nResults saved to {csv_file}")

    return results


def parse_args(argv: list[str]) -> tuple[int, int, int, bool, str]:
    """Positional arguments with defaults: rows cols generations visualize pattern."""
    rows = int(argv[0]) if len(argv) > 0 else 32
    cols = int(argv[1]) if len(argv) > 1 else 32
    generations = int(argv[2]) if len(argv) > 2 else 50
    visualize = bool(int(argv[3])) if len(argv) > 3 else False
    pattern = argv[4] if len(argv) > 4 else "random"

    if rows < 0 or cols < 0 or generations < 0:
        raise ValueError("rows, cols and generations must be non-negative")
    if pattern not in PATTERNS:
        raise ValueError(f"unknown pattern {pattern!r}, choose from: {', '.join(PATTERNS)}")

    return rows, cols, generations, visualize, pattern


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "--benchmark":
        benchmark()
        return

    try:
        rows, cols, generations, visualize, pattern = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}")
        print(USAGE)
        sys.exit(2)

    run_simulation(rows, cols, generations, visualize=visualize, pattern=pattern, seed=42)


if __name__ == "__main__":
    main()
