#!/usr/bin/env python3
"""
Setup script for the Survey Plot Gallery tutorial

Install in development mode:
    pip install -e .

This allows importing from anywhere:
    from data_engineering.synthetic import generate_tumor_measurements
    from data_engineering.reshape import to_long
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read requirements
requirements_file = Path(__file__).parent / "requirements.txt"
with open(requirements_file) as f:
    # Filter out duplicates and empty lines
    requirements = []
    seen = set()
    for line in f:
        line = line.strip()
        if line and not line.startswith('#'):
            # Extract package name (before ==, >=, etc.)
            pkg_name = line.split('==')[0].split('>=')[0].split('<=')[0].split('<')[0].split('>')[0].strip()
            if pkg_name not in seen:
                requirements.append(line)
                seen.add(pkg_name)

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
with open(readme_file, encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="survey-plot-gallery",
    version="1.0.0",
    description="Statistical plot gallery for exploring social-science survey data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests', 'tests.*', 'notebooks', 'docs']),
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'survey-figures=analysis.reports.generate_all_figures:main',
            'survey-download-tips=data_engineering.download.download_tips:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Topic :: Scientific/Engineering :: Visualization',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
