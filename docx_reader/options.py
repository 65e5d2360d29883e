"""Parsing options supplied by the consumer before a document is read."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DISPLAY_SCALE = 1.0
DEFAULT_HALF_POINTS = 24.0
LEGACY_IMAGE_PREFIX = "image"
LEGACY_IMAGE_EXTENSION = ".png"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Configuration for a single parse.

    Parameters
    ----------
    display_scale : float, default 1.0
        Multiplier applied to run font sizes after converting half points to points,
        e.g. the scaled density of the target display.
    default_half_points : float, default 24.0
        Size assumed when a ``w:sz`` element carries no usable value.
    legacy_image_prefix, legacy_image_extension : str
        Media file name pattern used to resolve drawings by their numeric id,
        ``image<id>.png`` by default.
    """

    display_scale: float = DEFAULT_DISPLAY_SCALE
    default_half_points: float = DEFAULT_HALF_POINTS
    legacy_image_prefix: str = LEGACY_IMAGE_PREFIX
    legacy_image_extension: str = LEGACY_IMAGE_EXTENSION

    def __post_init__(self) -> None:
        if self.display_scale <= 0:
            raise ValueError(f"display_scale must be positive, got {self.display_scale!r}")

    def legacy_image_name(self, drawing_id: str) -> str:
        return f"{self.legacy_image_prefix}{drawing_id}{self.legacy_image_extension}"
