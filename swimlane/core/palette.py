"""
Event Name Palette

Distinct event names, in first-seen order, mapped to evenly spaced hues:

    hue(i) = (i * 360 / distinct_count) % 360

Same name -> same color within one build. Colors are NOT stable across
builds whose distinct-name set differs: adding a name changes the spacing
and shifts the hues of names seen after it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..contracts.layout import PaletteEntry


@dataclass(frozen=True)
class PaletteConfig:
    """HSL parameters shared by every hue."""
    saturation: float = 100
    lightness: float = 50
    alpha: float = 1


def _number(value: float) -> str:
    # 120.0 -> "120", 51.42857142857143 stays as is
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def hue_for(index: int, count: int) -> float:
    return (index * (360 / (count or 1))) % 360


def hsl(hue: float, config: PaletteConfig) -> str:
    return (
        f"hsl({_number(hue)}, {_number(config.saturation)}%, "
        f"{_number(config.lightness)}%, {_number(config.alpha)})"
    )


def distinct_names(names: Iterable[str]) -> List[str]:
    """Distinct names in first-seen order."""
    return list(dict.fromkeys(names))


def build_palette(
    names: Iterable[str],
    config: PaletteConfig = PaletteConfig(),
) -> Tuple[PaletteEntry, ...]:
    unique = distinct_names(names)
    return tuple(
        PaletteEntry(
            name=name,
            hue=hue_for(i, len(unique)),
            color=hsl(hue_for(i, len(unique)), config),
        )
        for i, name in enumerate(unique)
    )


def color_map(palette: Iterable[PaletteEntry]) -> Dict[str, str]:
    return {entry.name: entry.color for entry in palette}
