"""
Model families for fitting.

Each family is linear in its parameters and is described by a design matrix,
so predictions, distances and least squares share one code path.
"""

from .base import ModelFamily
from .linear import LinearModel
from .quadratic import QuadraticModel


# Model registry - maps model names to family instances
MODEL_REGISTRY = {
    'linear': LinearModel(),
    'quadratic': QuadraticModel(),
}


def get_model(name):
    """
    Get model family by name.

    Parameters
    ----------
    name : str or ModelFamily
        Model name (e.g., 'linear', 'quadratic'). A ModelFamily instance
        is returned unchanged.

    Returns
    -------
    ModelFamily
        Model family

    Raises
    ------
    KeyError
        If model name not found in registry
    """
    if isinstance(name, ModelFamily):
        return name
    if name not in MODEL_REGISTRY:
        raise KeyError(f"Model '{name}' not found. Available: {list_models()}")
    return MODEL_REGISTRY[name]


def list_models():
    """List all available model names."""
    return list(MODEL_REGISTRY.keys())


def register_model(name, family):
    """
    Register a custom model family.

    Parameters
    ----------
    name : str
        Model name
    family : ModelFamily
        Family instance providing ``design_matrix``
    """
    if not isinstance(family, ModelFamily):
        raise TypeError(f"Expected a ModelFamily, got {type(family).__name__}")
    MODEL_REGISTRY[name] = family


__all__ = [
    'ModelFamily',
    'LinearModel',
    'QuadraticModel',
    'get_model',
    'list_models',
    'register_model',
    'MODEL_REGISTRY',
]
