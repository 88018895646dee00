#!/usr/bin/env python3
"""
Generate All Gallery Figures

Convenience script to render every chart example of the tutorial in sequence.

Usage:
    python -m analysis.reports.generate_all_figures

    # Or with specific figures only:
    python -m analysis.reports.generate_all_figures --figures swarm violin maps
"""

import argparse
import sys
import time
from pathlib import Path

import matplotlib

from config.paths import DEFAULT_TIPS_FILE, FIGURES
from config.style import DEFAULT_N, DEFAULT_SEED, apply_plot_style
from analysis.reports.gallery import FIGURES as FIGURE_BUILDERS


def positive_int(value):
    """argparse type for record counts"""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f'must be a positive integer, got {value}')
    return number


def run_figure(name, output_dir, n, seed):
    """Build one figure, reporting success or failure"""
    print('\n' + '='*80)
    print(f'GENERATING FIGURE: {name}')
    print('='*80)

    try:
        start_time = time.time()
        path = FIGURE_BUILDERS[name](output_dir, n=n, seed=seed)
        elapsed = time.time() - start_time

        print(f'\n✅ {name} complete! ({elapsed:.1f}s)')
        print(f'  ✓ Saved: {path}')
        return True

    except Exception as e:
        print(f'\n❌ Error generating {name}: {type(e).__name__}: {e}')
        return False


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate all figures for the survey plot gallery',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate all figures
  python -m analysis.reports.generate_all_figures

  # Generate specific figures only
  python -m analysis.reports.generate_all_figures --figures swarm density

  # Offline run (violin only if the tips CSV is already cached)
  python -m analysis.reports.generate_all_figures --skip-download
        """
    )

    parser.add_argument(
        '--figures',
        nargs='+',
        choices=list(FIGURE_BUILDERS),
        default=list(FIGURE_BUILDERS),
        help='Specific figures to generate (default: all)'
    )
    parser.add_argument('--n', type=positive_int, default=DEFAULT_N,
                        help=f'Records per synthetic table (default: {DEFAULT_N})')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help=f'Random seed (default: {DEFAULT_SEED})')
    parser.add_argument('--output-dir', type=Path, default=FIGURES,
                        help='Output directory')
    parser.add_argument(
        '--skip-download',
        action='store_true',
        help='Do not fetch the tips dataset; skip the violin example if it is not cached'
    )

    args = parser.parse_args(argv)

    matplotlib.use('Agg')
    apply_plot_style()

    figures_to_generate = list(args.figures)
    if args.skip_download and 'violin' in figures_to_generate and not DEFAULT_TIPS_FILE.exists():
        print('⚠️  Tips dataset not cached - skipping violin')
        figures_to_generate.remove('violin')

    print('='*80)
    print('SURVEY PLOT GALLERY GENERATION')
    print('='*80)
    print(f'\nGenerating figures: {", ".join(figures_to_generate)}')
    print(f'Records: {args.n:,} | Seed: {args.seed}')

    output_dir = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    print(f'Output directory: {output_dir}')

    # Track results
    results = {}
    start_time_total = time.time()

    for name in figures_to_generate:
        results[name] = run_figure(name, output_dir, args.n, args.seed)

    total_elapsed = time.time() - start_time_total

    # Summary
    print('\n' + '='*80)
    print('GENERATION SUMMARY')
    print('='*80)

    for name in figures_to_generate:
        status = '✅ Success' if results.get(name, False) else '❌ Failed'
        print(f'  {name:20s}: {status}')

    success_count = sum(1 for v in results.values() if v)
    total_count = len(results)

    print(f'\nTotal: {success_count}/{total_count} figures generated successfully')
    print(f'Time elapsed: {total_elapsed:.1f}s ({total_elapsed/60:.1f}m)')

    print(f'\n📁 Outputs saved to: {output_dir}/')

    # Exit code based on success
    if success_count == total_count:
        print('\n🎉 All figures generated successfully!')
        sys.exit(0)
    else:
        print(f'\n⚠️  {total_count - success_count} figure(s) failed')
        sys.exit(1)


if __name__ == '__main__':
    main()
