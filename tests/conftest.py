"""Shared fixtures for the gallery test suite."""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

sys.path.insert(0, str(Path(__file__).parent.parent))

from data_engineering.synthetic.presets import (  # noqa: E402
    generate_survey_responses,
    generate_tumor_measurements,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def tumor_wide():
    return generate_tumor_measurements(100, seed=42)


@pytest.fixture
def survey_wide():
    return generate_survey_responses(120, seed=7)


@pytest.fixture
def tips_df():
    rows = []
    for day in ['Thur', 'Fri', 'Sat', 'Sun']:
        for sex in ['Female', 'Male']:
            for i in range(4):
                bill = 10.0 + 3 * i + (2 if sex == 'Male' else 0)
                rows.append({'total_bill': bill, 'tip': round(bill * (0.12 + 0.02 * i), 2),
                             'sex': sex, 'day': day, 'time': 'Dinner', 'size': 2})
    return pd.DataFrame(rows)


@pytest.fixture
def tips_csv(tmp_path, tips_df):
    path = tmp_path / 'tips.csv'
    tips_df.to_csv(path, index=False)
    return path
