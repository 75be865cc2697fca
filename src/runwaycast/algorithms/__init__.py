from .configuration import detect_configuration
from .phases import FlightPhaseClassifier, is_arriving, is_departing
from .prediction import PredictionResult, run_predictions
from .runway import RunwayPrediction, predict_runway

__all__ = [
    "FlightPhaseClassifier",
    "PredictionResult",
    "RunwayPrediction",
    "detect_configuration",
    "is_arriving",
    "is_departing",
    "predict_runway",
    "run_predictions",
]
