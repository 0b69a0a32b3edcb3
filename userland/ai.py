"""AI application: a catalogue of models and their capabilities."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from userland.core import Application, UserlandCapabilities, _CapabilityFlags, register_application


class AiCapabilities(_CapabilityFlags):
    """Features an AI model or runtime supports."""

    TENSOR = 1 << 0
    MATRIX = 1 << 1
    NEURAL = 1 << 2
    DEEP = 1 << 3
    MACHINE = 1 << 4
    REINFORCEMENT = 1 << 5
    SUPERVISED = 1 << 6
    UNSUPERVISED = 1 << 7
    TRANSFER = 1 << 8
    ONLINE = 1 << 9
    BATCH = 1 << 10
    DISTRIBUTED = 1 << 11
    FEDERATED = 1 << 12
    QUANTIZATION = 1 << 13
    PRUNING = 1 << 14
    COMPRESSION = 1 << 15


@dataclass
class AiParameter:
    """A named model parameter."""

    name: str
    param_type: str
    value: str
    description: str = ""


@dataclass
class AiMetric:
    """A measured model metric."""

    name: str
    metric_type: str
    value: float
    description: str = ""


@dataclass
class AiModel:
    """A model known to the AI application."""

    name: str
    model_type: str
    version: str = ""
    description: str = ""
    architecture: str = ""
    parameters: list[AiParameter] = field(default_factory=list)
    metrics: list[AiMetric] = field(default_factory=list)
    capabilities: AiCapabilities = AiCapabilities(0)


class AiApplication(Application):
    """Application holding AI models."""

    def __init__(self) -> None:
        super().__init__("ai", "0.1.0", UserlandCapabilities.all())
        self.ai_capabilities = AiCapabilities.all()
        self._models: list[AiModel] = []

    @property
    def models(self) -> tuple[AiModel, ...]:
        """The models, in the order they were added."""
        return tuple(self._models)

    def add_model(self, model: AiModel) -> None:
        """Add a model."""
        self._models.append(model)

    def remove_model(self, name: str) -> None:
        """Remove the first model with this name, if any."""
        for index, model in enumerate(self._models):
            if model.name == name:
                del self._models[index]
                return

    def get_model(self, name: str) -> Optional[AiModel]:
        """Return the first model with this name, or None."""
        return next((m for m in self._models if m.name == name), None)

    def get_models_by_type(self, model_type: str) -> list[AiModel]:
        """Return the models of the given type."""
        return [m for m in self._models if m.model_type == model_type]

    def get_models_by_capability(self, capability: AiCapabilities) -> list[AiModel]:
        """Return the models whose capabilities include all of ``capability``."""
        return [m for m in self._models if capability in m.capabilities]


_application: Optional[AiApplication] = None
_lock = threading.Lock()


def init() -> AiApplication:
    """Create the AI application, store it and register it globally."""
    global _application
    application = AiApplication()
    with _lock:
        _application = application
    register_application(application)
    return application


def get_application() -> Optional[AiApplication]:
    """Return the AI application created by :func:`init`, if any."""
    with _lock:
        return _application