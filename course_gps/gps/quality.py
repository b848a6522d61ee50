"""Accuracy based GPS quality gate."""

from __future__ import annotations

import math
from typing import Optional

from .models import GpsAssessment

EXCELLENT_MAX_M = 3.0
GOOD_MAX_M = 5.0
FAIR_MAX_M = 10.0


def classify(accuracy_m: Optional[float]) -> GpsAssessment:
    """Grade a fix by its reported horizontal accuracy.

    Poor fixes are still fine for a coarse distance readout but callers should
    not let them drive position classification or shot detection.
    """

    if accuracy_m is None or not math.isfinite(accuracy_m) or accuracy_m < 0:
        return GpsAssessment(
            usable=False,
            quality="Poor",
            recommendation="No accuracy reported; waiting for a better fix",
            accuracy_m=None,
        )
    if accuracy_m <= EXCELLENT_MAX_M:
        return GpsAssessment(
            usable=True,
            quality="Excellent",
            recommendation="Perfect for precise distance measurements",
            accuracy_m=accuracy_m,
        )
    if accuracy_m <= GOOD_MAX_M:
        return GpsAssessment(
            usable=True,
            quality="Good",
            recommendation="Suitable for golf distance calculations",
            accuracy_m=accuracy_m,
        )
    if accuracy_m <= FAIR_MAX_M:
        return GpsAssessment(
            usable=True,
            quality="Fair",
            recommendation="Adequate for general golf guidance",
            accuracy_m=accuracy_m,
        )
    return GpsAssessment(
        usable=False,
        quality="Poor",
        recommendation="Consider moving to open area for better signal",
        accuracy_m=accuracy_m,
    )


def is_low_confidence(assessment: GpsAssessment) -> bool:
    return assessment.quality == "Poor"


__all__ = ["classify", "is_low_confidence"]
