"""Real-time signal engine for a multi-electrode deformation sensor."""

from .config import EngineConfig, load_config
from .engine import VERSION, EngineSnapshot, SignalEngine
from .forms import Form, FormStore, FormView

__all__ = [
    "VERSION",
    "EngineConfig",
    "EngineSnapshot",
    "Form",
    "FormStore",
    "FormView",
    "SignalEngine",
    "load_config",
]
