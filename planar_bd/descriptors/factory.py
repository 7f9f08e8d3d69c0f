"""
Factory function for creating descriptors by name.

Lets callers select a descriptor variant at construction time from a
configuration string, the way experiment scripts name them.

Functions:
    make_descriptor: Instantiate a descriptor from a name or class.
    available_descriptors: List the registered descriptor names.
"""

from __future__ import annotations

from typing import Dict, List, Type

from planar_bd.descriptors.angle_sum import AngleSum
from planar_bd.descriptors.angles import RelativeResultantAngle, ResultantAngle
from planar_bd.descriptors.base import BaseDescriptor
from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.descriptors.position import PolarCoord, PositionalCoord


# ---------------------------------------------------------------------------
# Descriptor look-up table (name -> class)
# ---------------------------------------------------------------------------
_DESCRIPTOR_REGISTRY: Dict[str, Type[BaseDescriptor]] = {
    cls.name: cls
    for cls in (
        PositionalCoord,
        PolarCoord,
        ResultantAngle,
        RelativeResultantAngle,
        AngleSum,
    )
}


def available_descriptors() -> List[str]:
    """Return the registered descriptor names in registration order."""
    return list(_DESCRIPTOR_REGISTRY)


def _resolve_class(kind: str | Type[BaseDescriptor]) -> Type[BaseDescriptor]:
    """Convert a registry name to its class, or pass through a class.

    Args:
        kind: Either a ``BaseDescriptor`` subclass or a registered name.

    Returns:
        The descriptor class.

    Raises:
        ValueError: If the name is not registered or the class is not a
            ``BaseDescriptor`` subclass.
    """
    if isinstance(kind, type):
        if not issubclass(kind, BaseDescriptor):
            raise ValueError(f"{kind.__name__} is not a BaseDescriptor subclass")
        return kind
    if kind not in _DESCRIPTOR_REGISTRY:
        raise ValueError(
            f"Unknown descriptor '{kind}'. Choose from {available_descriptors()}"
        )
    return _DESCRIPTOR_REGISTRY[kind]


def make_descriptor(
    kind: str | Type[BaseDescriptor],
    config: DescriptorConfig | None = None,
) -> BaseDescriptor:
    """Create a descriptor instance.

    Args:
        kind: A registered name (``'positional'``, ``'polar'``,
            ``'resultant_angle'``, ``'relative_resultant_angle'``,
            ``'angle_sum'``) or a ``BaseDescriptor`` subclass.
        config: Optional geometry shared by the descriptor.

    Returns:
        A fresh, un-computed descriptor.
    """
    cls = _resolve_class(kind)
    return cls(config)
