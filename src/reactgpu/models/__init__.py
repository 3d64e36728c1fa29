"""Value models shared across reactgpu."""

from reactgpu.models.numerical import Precision

__all__ = ["Precision"]
