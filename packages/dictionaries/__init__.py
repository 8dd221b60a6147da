from __future__ import annotations
from typing import List
from .base import BaseDictionary, REGISTRY, register

from . import wordlist  # noqa: F401
from . import wordfreq_dict  # noqa: F401


def create_dictionary(dictionary_id: str, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary backend by id.
    Keyword arguments are passed to the backend's constructor.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
