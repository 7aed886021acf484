"""
Models package for AI Market.

Exports the catalog, activation, brief and order models.
"""
from .modules import Module
from .activations import Activation
from .briefs import Brief, BriefRequest
from .orders import OrderRequest, DemoActivationRequest, CaptureResult

__all__ = [
    "Module",
    "Activation",
    "Brief",
    "BriefRequest",
    "OrderRequest",
    "DemoActivationRequest",
    "CaptureResult",
]
