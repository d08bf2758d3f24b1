import pytest

from answer_coach.analysis.heuristics import HeuristicScorer
from answer_coach.infrastructure.audio.metrics import MetricsExtractor


@pytest.fixture
def extractor():
    return MetricsExtractor()


@pytest.fixture
def scorer():
    return HeuristicScorer()
