"""
Weights module.

Custom weighting profiles, one per (user, property type).
"""

from .interfaces import IWeightsStore
from .models import CustomWeights, WEIGHT_FIELDS
from .repository import WeightsRepository, get_weights_repository, reset_weights_repository
from .service import WeightsService, get_weights_service, reset_weights_service

__all__ = [
    "IWeightsStore",
    "CustomWeights",
    "WEIGHT_FIELDS",
    "WeightsRepository",
    "get_weights_repository",
    "reset_weights_repository",
    "WeightsService",
    "get_weights_service",
    "reset_weights_service",
]
