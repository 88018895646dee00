#!/usr/bin/env python3
"""
Download the restaurant tips dataset used by the violin-plot example

The CSV (columns total_bill, tip, sex, smoker, day, time, size) is fetched
once and cached in the bronze layer. Loading adds the tip percentage
column the example plots.

Data source: https://github.com/mwaskom/seaborn-data

Usage:
    python -m data_engineering.download.download_tips            # Fetch if not cached
    python -m data_engineering.download.download_tips --force    # Re-download
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import pandas as pd
import requests

from config.paths import BRONZE_TIPS, DEFAULT_TIPS_FILE
from data_engineering.utils.validation import validate_tips

# Configuration
TIPS_URL = "https://raw.githubusercontent.com/mwaskom/seaborn-data/master/tips.csv"
REQUEST_TIMEOUT = 30
OUTPUT_DIR = BRONZE_TIPS


def download_tips(url: str = TIPS_URL, output_dir: Path = OUTPUT_DIR,
                  force: bool = False, verbose: bool = True) -> Path:
    """
    Fetch the tips CSV into output_dir

    Args:
        url: CSV location
        output_dir: Cache directory
        force: Re-download even if the file is cached
        verbose: Print progress

    Returns:
        Path to the cached CSV

    Raises:
        requests.RequestException: Network or HTTP error
    """
    output_dir = Path(output_dir)
    filepath = output_dir / "tips.csv"

    if filepath.exists() and not force:
        if verbose:
            print(f"✓ Using cached tips dataset: {filepath}")
        return filepath

    if verbose:
        print(f"📥 Downloading tips dataset...")
        print(f"   URL: {url}")

    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        print(f"❌ Error downloading tips dataset: {e}")
        raise

    output_dir.mkdir(parents=True, exist_ok=True)
    filepath.write_bytes(response.content)

    if verbose:
        print(f"💾 Saved to: {filepath}")
        print(f"   File size: {filepath.stat().st_size / 1024:.1f} KB")

    return filepath


def add_tip_percentage(df: pd.DataFrame) -> pd.DataFrame:
    """Add tip_pct = tip / total_bill * 100, rounded to one decimal"""
    df = df.copy()
    df['tip_pct'] = (df['tip'] / df['total_bill'] * 100).round(1)
    return df


def load_tips(path: Optional[Path] = None, download: bool = True,
              verbose: bool = True) -> pd.DataFrame:
    """
    Load, validate and enrich the tips dataset

    Args:
        path: CSV path (defaults to the bronze cache)
        download: Fetch the file when it is not cached
        verbose: Print progress

    Returns:
        DataFrame with tip_pct

    Raises:
        FileNotFoundError: File is not cached and download is False
    """
    path = Path(path) if path is not None else DEFAULT_TIPS_FILE

    if not path.exists():
        if not download:
            raise FileNotFoundError(
                f"Tips dataset not found: {path}\n"
                f"   Run: python -m data_engineering.download.download_tips"
            )
        path = download_tips(output_dir=path.parent, verbose=verbose)

    df = pd.read_csv(path)
    if verbose:
        print(f"✓ Loaded {len(df):,} tips from {path}")

    df = validate_tips(df)
    return add_tip_percentage(df)


def print_summary(df: pd.DataFrame):
    """Print summary statistics"""
    print("\n" + "="*60)
    print("📊 TIPS SUMMARY")
    print("="*60)

    print(f"\nTotal bills: {len(df):,}")
    print(f"Mean tip: {df['tip_pct'].mean():.1f}% of the bill")

    print(f"\nMedian tip % by day:")
    for day, pct in df.groupby('day')['tip_pct'].median().items():
        print(f"  {day:6s}: {pct:5.1f}%")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Download the tips dataset for the violin-plot example'
    )
    parser.add_argument('--force', action='store_true',
                        help='Re-download even if the file is cached')
    parser.add_argument('--url', default=TIPS_URL,
                        help='CSV location (default: seaborn-data on GitHub)')
    parser.add_argument('--output-dir', type=Path, default=OUTPUT_DIR,
                        help='Cache directory')

    args = parser.parse_args(argv)

    print("🚀 Tips Dataset Downloader")
    print("="*60 + "\n")

    try:
        filepath = download_tips(args.url, args.output_dir, force=args.force)
    except requests.exceptions.RequestException:
        sys.exit(1)

    print_summary(load_tips(filepath, download=False, verbose=False))

    print("\n✅ Done!")


if __name__ == "__main__":
    main()
