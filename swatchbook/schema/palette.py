# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Palette: the result of a generation run.

Holds the quantized swatches, the targets that were scored, the swatch
selected for each target, and the dominant swatch. Read-only once built.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from swatchbook.schema.swatch import Swatch
from swatchbook.schema.target import (
    DARK_MUTED,
    DARK_VIBRANT,
    DEFAULT_TARGETS,
    LIGHT_MUTED,
    LIGHT_VIBRANT,
    MUTED,
    VIBRANT,
    TargetProfile,
)


class Palette:
    """
    Prominent colors extracted from an image.

    Build one with :func:`swatchbook.generate` or :meth:`Palette.from_swatches`.
    """

    __slots__ = ("_swatches", "_targets", "_selected", "_dominant")

    def __init__(
        self,
        swatches: tuple[Swatch, ...],
        targets: tuple[TargetProfile, ...],
        selected: Mapping[TargetProfile, Optional[Swatch]],
        dominant: Optional[Swatch],
    ) -> None:
        self._swatches = tuple(swatches)
        self._targets = tuple(targets)
        self._selected = MappingProxyType(dict(selected))
        self._dominant = dominant

    @classmethod
    def from_swatches(
        cls,
        swatches: Iterable[Swatch],
        targets: Iterable[TargetProfile] = DEFAULT_TARGETS,
    ) -> Palette:
        """
        Score pre-generated swatches against ``targets``.

        Useful for testing, or to rebuild a palette from stored swatches.

        Raises:
            ValueError: If ``swatches`` is None or empty
        """
        if swatches is None:
            raise ValueError("List of swatches is not valid")
        swatches = tuple(swatches)
        if not swatches:
            raise ValueError("List of swatches is not valid")

        from swatchbook.measure.scoring import build_palette
        return build_palette(swatches, tuple(targets))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def swatches(self) -> tuple[Swatch, ...]:
        """All swatches that make up the palette."""
        return self._swatches

    @property
    def targets(self) -> tuple[TargetProfile, ...]:
        """The targets used to generate this palette, in scoring order."""
        return self._targets

    @property
    def selected_swatches(self) -> Mapping[TargetProfile, Optional[Swatch]]:
        """Read-only mapping of target → selected swatch (None if no match)."""
        return self._selected

    @property
    def dominant_swatch(self) -> Optional[Swatch]:
        """The swatch with the greatest population, or None for an empty palette."""
        return self._dominant

    def swatch_for_target(self, target: TargetProfile) -> Optional[Swatch]:
        """The swatch selected for ``target``, or None."""
        return self._selected.get(target)

    def color_for_target(self, target: TargetProfile, default: Optional[int] = None) -> Optional[int]:
        """Packed color selected for ``target``, or ``default``."""
        swatch = self.swatch_for_target(target)
        return swatch.color if swatch is not None else default

    def dominant_color(self, default: Optional[int] = None) -> Optional[int]:
        return self._dominant.color if self._dominant is not None else default

    # -------------------------------------------------------------------------
    # Built-in target shortcuts
    # -------------------------------------------------------------------------

    @property
    def vibrant_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(VIBRANT)

    @property
    def light_vibrant_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(LIGHT_VIBRANT)

    @property
    def dark_vibrant_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(DARK_VIBRANT)

    @property
    def muted_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(MUTED)

    @property
    def light_muted_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(LIGHT_MUTED)

    @property
    def dark_muted_swatch(self) -> Optional[Swatch]:
        return self.swatch_for_target(DARK_MUTED)

    def vibrant_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(VIBRANT, default)

    def light_vibrant_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(LIGHT_VIBRANT, default)

    def dark_vibrant_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(DARK_VIBRANT, default)

    def muted_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(MUTED, default)

    def light_muted_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(LIGHT_MUTED, default)

    def dark_muted_color(self, default: Optional[int] = None) -> Optional[int]:
        return self.color_for_target(DARK_MUTED, default)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "swatches": [s.to_dict() for s in self._swatches],
            "dominant": self._dominant.to_dict() if self._dominant is not None else None,
            "targets": {
                t.name: (s.to_dict() if s is not None else None)
                for t, s in self._selected.items()
            },
        }

    def __repr__(self) -> str:
        return (
            f"Palette(swatches={len(self._swatches)}, "
            f"targets={[t.name for t in self._targets]}, "
            f"dominant={self._dominant!r})"
        )
