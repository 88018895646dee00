"""
Dataset presets used by the plot gallery

Each preset is an explicit list of generation steps plus a thin wrapper
that runs it. Group-conditioned parameters live in module-level lookup
tables so the examples can print or reuse them.
"""

from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from config.style import DEFAULT_N, DEFAULT_SEED
from data_engineering.synthetic.generator import (
    ColumnStep,
    derived,
    generate_observations,
    sample,
)

# ==============================================================================
# TUMOUR-STYLE MEASUREMENTS (two groups, six correlated features)
# ==============================================================================

TUMOR_GROUPS = ('Group A', 'Group B')
TUMOR_FEATURES = [
    'radius_mean',
    'texture_mean',
    'perimeter_mean',
    'area_mean',
    'smoothness_mean',
    'compactness_mean',
]
PERIMETER_NOISE_SD = 2.5
AREA_NOISE_SD = 40.0

RADIUS_BY_GROUP = {
    'Group A': {'loc': 12.1, 'scale': 1.8},
    'Group B': {'loc': 17.5, 'scale': 3.2},
}
TEXTURE_BY_GROUP = {
    'Group A': {'loc': 17.9, 'scale': 4.0},
    'Group B': {'loc': 21.6, 'scale': 3.8},
}
SMOOTHNESS_BY_GROUP = {
    'Group A': {'loc': 0.092, 'scale': 0.013},
    'Group B': {'loc': 0.103, 'scale': 0.012},
}


def tumor_measurement_steps() -> List[ColumnStep]:
    """Radius and smoothness drive the perimeter, area and compactness columns"""
    return [
        sample('radius_mean', 'normal', by_group=RADIUS_BY_GROUP),
        sample('texture_mean', 'normal', by_group=TEXTURE_BY_GROUP),
        derived('perimeter_mean', ['radius_mean'], lambda r: 6 * r,
                noise_sd=PERIMETER_NOISE_SD),
        derived('area_mean', ['radius_mean'], lambda r: np.pi * r ** 2,
                noise_sd=AREA_NOISE_SD, clip=(1.0, None)),
        sample('smoothness_mean', 'normal', by_group=SMOOTHNESS_BY_GROUP),
        derived('compactness_mean', ['smoothness_mean'], lambda s: 1.8 * s - 0.08,
                noise_sd=0.02, clip=(0.01, None)),
    ]


def generate_tumor_measurements(n: int = DEFAULT_N, seed: int = DEFAULT_SEED,
                                verbose: bool = False) -> pd.DataFrame:
    return generate_observations(n, seed, TUMOR_GROUPS, tumor_measurement_steps(),
                                 verbose=verbose)


# ==============================================================================
# SURVEY RESPONSES (four education groups)
# ==============================================================================

EDUCATION_LEVELS = ('Primary', 'Secondary', 'Tertiary', 'Postgraduate')
SURVEY_FEATURES = ['age', 'income', 'life_satisfaction', 'trust_score', 'hours_online']

# log-income parameters
INCOME_BY_EDUCATION = {
    'Primary': {'mean': 9.9, 'sigma': 0.35},
    'Secondary': {'mean': 10.2, 'sigma': 0.35},
    'Tertiary': {'mean': 10.6, 'sigma': 0.35},
    'Postgraduate': {'mean': 10.9, 'sigma': 0.35},
}
TRUST_BY_EDUCATION = {
    'Primary': {'loc': 4.6},
    'Secondary': {'loc': 5.0},
    'Tertiary': {'loc': 5.6},
    'Postgraduate': {'loc': 6.1},
}


def survey_response_steps() -> List[ColumnStep]:
    return [
        sample('age', 'uniform', low=18, high=80),
        sample('income', 'lognormal', by_group=INCOME_BY_EDUCATION),
        derived('life_satisfaction', ['income'],
                lambda inc: 4.0 + 1.2 * np.log(inc / 20000.0),
                noise_sd=1.2, clip=(0.0, 10.0)),
        sample('trust_score', 'normal', by_group=TRUST_BY_EDUCATION, scale=1.5),
        derived('hours_online', ['age'], lambda age: 6.5 - 0.05 * age,
                noise_sd=1.0, clip=(0.0, 24.0)),
    ]


def generate_survey_responses(n: int = DEFAULT_N, seed: int = DEFAULT_SEED,
                              verbose: bool = False) -> pd.DataFrame:
    return generate_observations(n, seed, EDUCATION_LEVELS, survey_response_steps(),
                                 verbose=verbose)


# ==============================================================================
# SURVEY WAVES (monthly panel)
# ==============================================================================

SURVEY_WAVES = tuple(f'2024-{month:02d}' for month in range(1, 13))

# slow upward drift with a summer dip
SATISFACTION_BY_WAVE = {
    wave: {'loc': 6.0 + 0.08 * i - 0.4 * np.sin(np.pi * i / 11)}
    for i, wave in enumerate(SURVEY_WAVES)
}


def survey_wave_steps() -> List[ColumnStep]:
    return [
        sample('satisfaction', 'normal', by_group=SATISFACTION_BY_WAVE, scale=1.4),
        derived('response_minutes', ['satisfaction'], lambda s: 12.0 - 0.5 * s,
                noise_sd=2.0, clip=(2.0, None)),
    ]


def generate_survey_waves(n: int = 600, seed: int = DEFAULT_SEED,
                          verbose: bool = False) -> pd.DataFrame:
    return generate_observations(n, seed, SURVEY_WAVES, survey_wave_steps(),
                                 verbose=verbose)


# ==============================================================================
# REGIONAL SURVEY (US states, respondent coordinates)
# ==============================================================================

STATE_CENTROIDS: Dict[str, Tuple[float, float]] = {
    'AZ': (34.3, -111.7),
    'CA': (36.8, -119.4),
    'CO': (39.0, -105.5),
    'FL': (28.6, -82.4),
    'GA': (32.7, -83.4),
    'IL': (40.0, -89.2),
    'MN': (46.3, -94.3),
    'NY': (42.9, -75.5),
    'TX': (31.0, -99.9),
    'WA': (47.4, -120.5),
}
STATE_CODES = tuple(STATE_CENTROIDS)

WELLBEING_BY_STATE = {
    'AZ': {'loc': 6.1}, 'CA': {'loc': 6.4}, 'CO': {'loc': 7.0},
    'FL': {'loc': 6.2}, 'GA': {'loc': 5.8}, 'IL': {'loc': 5.9},
    'MN': {'loc': 7.1}, 'NY': {'loc': 6.0}, 'TX': {'loc': 6.3},
    'WA': {'loc': 6.8},
}


def regional_survey_steps() -> List[ColumnStep]:
    latitude = {state: {'loc': lat} for state, (lat, _) in STATE_CENTROIDS.items()}
    longitude = {state: {'loc': lon} for state, (_, lon) in STATE_CENTROIDS.items()}
    return [
        sample('latitude', 'normal', by_group=latitude, scale=0.8),
        sample('longitude', 'normal', by_group=longitude, scale=1.0),
        sample('wellbeing', 'normal', by_group=WELLBEING_BY_STATE, scale=1.3),
        derived('community_trust', ['wellbeing'], lambda w: 1.5 + 0.6 * w,
                noise_sd=0.9, clip=(0.0, 10.0)),
    ]


def generate_regional_survey(n: int = 400, seed: int = DEFAULT_SEED,
                             verbose: bool = False) -> pd.DataFrame:
    return generate_observations(n, seed, STATE_CODES, regional_survey_steps(),
                                 verbose=verbose)
