#!/usr/bin/env python3
"""
Benchmark Analysis & Visualization
Compares the two-phase and NumPy engines from the benchmark CSV:
throughput, time per generation and speedup per grid size.

Usage: game-of-life-analyze [csv_path] [output_dir]
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.font_manager import FontProperties
from matplotlib.gridspec import GridSpec

from .sequential import BENCHMARK_CSV

COLORS = {
    'primary': '#2E86AB',
    'secondary': '#A23B72',
    'success': '#06A77D',
    'warning': '#F18F01',
    'danger': '#C73E1D',
}
ENGINE_COLORS = {'two_phase': COLORS['secondary'], 'numpy': COLORS['primary']}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 16}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 12}
LEGEND_FONT = FontProperties(family='sans-serif', size=10)

COLUMN_NAMES = {
    'size': 'grid_size',
    'total_time_ms': 'time_ms',
    'time_per_generation_ms': 'time_per_gen_ms',
    'cells_per_second_million': 'throughput_mcells_s',
}


def load_results(csv_path):
    """Load benchmark results, or None if the file is missing or empty"""
    try:
        df = pd.read_csv(csv_path)
    except FileNotFoundError:
        print(f"✗ File not found: {csv_path}")
        return None
    except pd.errors.EmptyDataError:
        print(f"✗ File is empty: {csv_path}")
        return None

    df = df.rename(columns=COLUMN_NAMES)
    print(f"✓ Loaded {len(df)} results from {csv_path}")
    return df


def calculate_metrics(df):
    """Speedup of the NumPy engine over the two-phase engine for each grid size"""
    metrics = {}

    # repeated runs of the same size are averaged
    per_gen = df.groupby(['engine', 'grid_size'])['time_per_gen_ms'].mean()
    two_phase = per_gen.get('two_phase', pd.Series(dtype=float))
    vectorized = per_gen.get('numpy', pd.Series(dtype=float))
    common_sizes = sorted(set(two_phase.index) & set(vectorized.index))

    speedups = []
    for size in common_sizes:
        speedups.append(float(two_phase[size] / vectorized[size]))

    metrics['common_sizes'] = common_sizes
    metrics['speedups'] = speedups
    if speedups:
        metrics['mean_speedup'] = float(np.mean(speedups))
        metrics['max_speedup'] = float(np.max(speedups))

    if not df.empty:
        metrics['best'] = df.loc[df['throughput_mcells_s'].idxmax()]

    return metrics


def create_dashboard(df, metrics):
    """Throughput, time per generation and speedup panels"""
    plt.style.use('seaborn-v0_8-darkgrid')
    sns.set_palette("husl")

    fig = plt.figure(figsize=(16, 10))
    fig.patch.set_facecolor('white')
    gs = GridSpec(2, 2, figure=fig, hspace=0.35, wspace=0.25)

    fig.suptitle('Game of Life: Two-phase vs NumPy Engine',
                 fontsize=20, fontweight='bold',
                 color=COLORS['primary'], y=0.98)

    # PANEL 1: Throughput
    ax1 = fig.add_subplot(gs[0, 0])
    for engine, data in df.groupby('engine'):
        data = data.sort_values('grid_size')
        ax1.plot(data['grid_size'], data['throughput_mcells_s'],
                 marker='o', linewidth=3, markersize=9, label=engine,
                 color=ENGINE_COLORS.get(engine),
                 markeredgecolor='white', markeredgewidth=2)
    ax1.set_xlabel('Grid Size (cells per side)', **LABEL_FONT)
    ax1.set_ylabel('Throughput (M cells/s)', **LABEL_FONT)
    ax1.set_title('Performance Throughput', **TITLE_FONT, pad=15)
    ax1.set_xscale('log', base=2)
    ax1.legend(loc='upper left', framealpha=0.95, prop=LEGEND_FONT)

    # PANEL 2: Time per generation
    ax2 = fig.add_subplot(gs[0, 1])
    sns.barplot(data=df, x='grid_size', y='time_per_gen_ms', hue='engine',
                palette=ENGINE_COLORS, ax=ax2)
    ax2.set_yscale('log')
    ax2.set_xlabel('Grid Size', **LABEL_FONT)
    ax2.set_ylabel('Time per Generation (ms)', **LABEL_FONT)
    ax2.set_title('Time per Generation', **TITLE_FONT, pad=15)

    # PANEL 3: Speedup
    ax3 = fig.add_subplot(gs[1, :])
    sizes = metrics.get('common_sizes', [])
    speedups = metrics.get('speedups', [])
    if sizes:
        labels = [f'{s}×{s}' for s in sizes]
        bars = ax3.bar(labels, speedups, color=COLORS['success'], edgecolor='black', linewidth=1.5)
        for bar, value in zip(bars, speedups):
            ax3.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                     f'{value:.1f}×', ha='center', va='bottom',
                     fontsize=11, fontweight='bold')
        ax3.axhline(y=1, color=COLORS['danger'], linestyle='--', linewidth=2, alpha=0.7)
    ax3.set_xlabel('Grid Size', **LABEL_FONT)
    ax3.set_ylabel('Speedup (NumPy / two-phase)', **LABEL_FONT)
    ax3.set_title('NumPy Speedup', **TITLE_FONT, pad=15)

    return fig


def print_summary(df, metrics):
    """Print terminal summary"""
    print("\n" + "=" * 72)
    print("BENCHMARK SUMMARY")
    print("=" * 72)

    if 'best' in metrics:
        best = metrics['best']
        print("\nPEAK THROUGHPUT:")
        print(f"   Engine: {best['engine']}")
        print(f"   Grid Size: {int(best['grid_size'])}×{int(best['grid_size'])}")
        print(f"   Throughput: {best['throughput_mcells_s']:.2f} M cells/s")

    if metrics.get('speedups'):
        print("\nSPEEDUP (NumPy vs two-phase):")
        for size, speedup in zip(metrics['common_sizes'], metrics['speedups']):
            print(f"   {size:>5}×{size:<5} {speedup:>8.2f}×")
        print(f"   Average Speedup: {metrics['mean_speedup']:>8.2f}×")
        print(f"   Maximum Speedup: {metrics['max_speedup']:>8.2f}×")

    print("\n" + "=" * 72 + "\n")


def main(argv=None, show=True):
    if argv is None:
        argv = sys.argv[1:]

    csv_path = Path(argv[0]) if len(argv) > 0 else Path(BENCHMARK_CSV)
    output_dir = Path(argv[1]) if len(argv) > 1 else Path('benchmarks')

    print("\nLoading benchmark data...")
    df = load_results(csv_path)

    if df is None or df.empty:
        print("\nError: No benchmark data found!")
        print("\nPlease run the benchmark first:")
        print("  game-of-life --benchmark")
        sys.exit(1)

    print("\nCalculating performance metrics...")
    metrics = calculate_metrics(df)

    output_dir.mkdir(parents=True, exist_ok=True)
    fig = create_dashboard(df, metrics)
    output_path = output_dir / 'benchmark_dashboard.png'
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    print(f"    Saved: {output_path}")

    print_summary(df, metrics)

    if show:
        plt.show()
    plt.close(fig)
    return output_path


if __name__ == "__main__":
    main()
