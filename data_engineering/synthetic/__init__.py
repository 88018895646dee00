"""
Synthetic Data Module

Seeded generators for the gallery's example tables:
- generator: ordered generation steps (independent draws, derived columns)
- presets: the concrete tables each chart example uses
"""

from .generator import (
    GROUP_COLUMN,
    ColumnStep,
    derived,
    generate_observations,
    sample,
)
from .presets import (
    TUMOR_FEATURES,
    TUMOR_GROUPS,
    generate_regional_survey,
    generate_survey_responses,
    generate_survey_waves,
    generate_tumor_measurements,
)

__all__ = [
    'GROUP_COLUMN',
    'ColumnStep',
    'derived',
    'generate_observations',
    'sample',
    'TUMOR_FEATURES',
    'TUMOR_GROUPS',
    'generate_regional_survey',
    'generate_survey_responses',
    'generate_survey_waves',
    'generate_tumor_measurements',
]
