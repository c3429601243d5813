from envmeasure.models.provider import Provider
from envmeasure.models.measurement import Measurement
from envmeasure.models.metric import Metric

__all__ = [
    'Provider',
    'Measurement',
    'Metric',
]
