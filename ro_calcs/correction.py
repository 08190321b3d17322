from abc import ABC, abstractmethod

from .pressure import predict_minimum_pressure


class CorrectionModel(ABC):
    """
    Data-driven correction applied on top of the physics baseline.
    Implementations return an additive adjustment in bar.
    """

    @abstractmethod
    def adjust(self, baseline):
        pass


class NoCorrection(CorrectionModel):
    """Leaves the physics baseline untouched."""

    def adjust(self, baseline):
        return 0.0


def corrected_pressure(conditions, model=None):
    """Baseline pressure plus the model's adjustment, rounded to 0.01 bar.

    Without a model this is exactly ``predict_minimum_pressure``.
    """
    baseline = predict_minimum_pressure(conditions)
    if model is None:
        return baseline
    return round(baseline + model.adjust(baseline), 2)
