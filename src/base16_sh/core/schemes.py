"""
Scheme catalog.

Scans the scheme directory tree once and freezes the result:

    {schemes_dir}/base16/{name}.yaml
    {schemes_dir}/base24/{name}.yaml

Besides the alphabetical name list the catalog holds a perceptual
ordering used for next/previous navigation. That ordering is a greedy
nearest-neighbour tour over 48-dimensional color vectors (16 slots x RGB),
starting from the darkest background, with greyscale schemes moved to the
end. It is intentionally approximate: there is no backtracking or 2-opt
pass, and exact distance ties fall to the earlier name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from .colors import distance, hex_to_rgb, is_greyscale
from .errors import CatalogError
from .models import SYSTEM_SLOTS, SchemeDefinition, SchemeOrder, SchemeRecord, SchemeSystem
from .names import canonical_name
from .scheme_loader import SCHEME_EXTENSION, LoadResult, load_scheme_file, try_load_scheme

logger = logging.getLogger(__name__)

# Slots that make up a scheme's color vector, in vector order
VECTOR_SLOTS: tuple[str, ...] = SYSTEM_SLOTS[SchemeSystem.BASE16]

ColorVector = tuple[int, ...]


def color_vector(palette: Mapping[str, str]) -> ColorVector:
    """Concatenate the RGB triples of the 16 base slots."""
    vector: list[int] = []
    for slot in VECTOR_SLOTS:
        vector.extend(hex_to_rgb(palette.get(slot, "")))
    return tuple(vector)


def scan_scheme_records(schemes_dir: Path) -> dict[str, SchemeRecord]:
    """Collect scheme records from the per-system sub-directories.

    A later system directory overwrites an earlier one on name clashes.
    Missing sub-directories contribute nothing.
    """
    records: dict[str, SchemeRecord] = {}
    for system in SchemeSystem:
        system_dir = schemes_dir / system.value
        if not system_dir.is_dir():
            logger.warning(f"Scheme directory not found: {system_dir}")
            continue
        try:
            entries = sorted(system_dir.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list scheme directory {system_dir}: {e}")
            continue

        for path in entries:
            if path.suffix != SCHEME_EXTENSION or not path.is_file():
                continue
            name = canonical_name(path.stem)
            if not name:
                logger.debug(f"Skipping scheme with empty name: {path}")
                continue
            if name in records:
                logger.warning(f"Scheme '{name}' from {path} replaces {records[name].path}")
            records[name] = SchemeRecord(name=name, path=str(path), system=system)
    return records


def perceptual_order(definitions: Iterable[tuple[str, SchemeDefinition]]) -> list[str]:
    """Order scheme names by visual similarity.

    Args:
        definitions: ``(name, definition)`` pairs for every parsable scheme.

    Returns:
        Names as a nearest-neighbour tour, non-greyscale schemes first and
        greyscale schemes last, each group keeping its tour order.
    """
    candidates = sorted(definitions, key=lambda item: item[0])
    if not candidates:
        return []

    names = [name for name, _ in candidates]
    vectors = [color_vector(d.palette) for _, d in candidates]

    # Darkest background: lowest r+g+b of base00 (first three components)
    current = min(range(len(candidates)), key=lambda i: sum(vectors[i][:3]))
    # Kept in ascending index order so exact ties fall to the earlier name
    unvisited = [i for i in range(len(candidates)) if i != current]
    tour = [current]

    while unvisited:
        origin = vectors[current]
        best = unvisited[0]
        best_distance = distance(origin, vectors[best])
        for i in unvisited[1:]:
            d = distance(origin, vectors[i])
            if d < best_distance:
                best, best_distance = i, d
        unvisited.remove(best)
        tour.append(best)
        current = best

    greyscale = {i for i, (_, d) in enumerate(candidates) if is_greyscale(d.palette)}
    colored = [names[i] for i in tour if i not in greyscale]
    grey = [names[i] for i in tour if i in greyscale]
    return colored + grey


class SchemeCatalog:
    """Immutable index of scheme records.

    Build with :meth:`build` (or :meth:`from_records` in tests); instances
    are safe to share between concurrent requests.
    """

    def __init__(
        self,
        records: Mapping[str, SchemeRecord],
        color_order: Iterable[str],
    ) -> None:
        self._records: Mapping[str, SchemeRecord] = MappingProxyType(dict(records))
        self._names: tuple[str, ...] = tuple(sorted(self._records))
        self._color_order: tuple[str, ...] = tuple(color_order)
        self._positions: Mapping[SchemeOrder, Mapping[str, int]] = MappingProxyType(
            {
                SchemeOrder.ALPHA: MappingProxyType(
                    {name: i for i, name in enumerate(self._names)}
                ),
                SchemeOrder.COLOR: MappingProxyType(
                    {name: i for i, name in enumerate(self._color_order)}
                ),
            }
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(cls, schemes_dir: Path) -> SchemeCatalog:
        """Scan ``schemes_dir`` and compute both orderings.

        Raises:
            CatalogError: If ``schemes_dir`` is missing or not a directory.
        """
        if not schemes_dir.is_dir():
            raise CatalogError("Scheme directory does not exist", schemes_dir)

        records = scan_scheme_records(schemes_dir)
        catalog = cls.from_records(records)
        logger.info(
            f"Loaded {len(catalog)} schemes into index "
            f"({len(catalog.color_order)} in color order)"
        )
        return catalog

    @classmethod
    def from_records(cls, records: Mapping[str, SchemeRecord]) -> SchemeCatalog:
        """Build a catalog from records, parsing each scheme for the color order."""
        results: list[LoadResult] = [try_load_scheme(r) for r in records.values()]
        for failed in (r for r in results if not r.ok):
            logger.warning(f"Skipping scheme '{failed.record.name}': {failed.error}")

        loaded = [(r.record.name, r.definition) for r in results if r.definition is not None]
        return cls(records, perceptual_order(loaded))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    @property
    def records(self) -> Mapping[str, SchemeRecord]:
        return self._records

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def color_order(self) -> tuple[str, ...]:
        return self._color_order

    def get(self, name: str) -> SchemeRecord | None:
        return self._records.get(name)

    def list_names(self, order: SchemeOrder = SchemeOrder.ALPHA) -> tuple[str, ...]:
        """Scheme names in alphabetical or perceptual order."""
        if order == SchemeOrder.COLOR:
            return self._color_order
        return self._names

    def neighbors(
        self, name: str, order: SchemeOrder = SchemeOrder.ALPHA
    ) -> tuple[str | None, str | None]:
        """Previous and next scheme names around ``name`` in the chosen order.

        Returns ``None`` on either side at a list boundary, and
        ``(None, None)`` when ``name`` is not part of the ordering.
        """
        ordered = self.list_names(order)
        position = self._positions[order].get(name)
        if position is None:
            return None, None
        prev_name = ordered[position - 1] if position > 0 else None
        next_name = ordered[position + 1] if position + 1 < len(ordered) else None
        return prev_name, next_name

    def load_definition(self, record: SchemeRecord) -> SchemeDefinition:
        """Re-read and parse the scheme file behind ``record``.

        Raises:
            SchemeReadError: If the file cannot be read.
            SchemeParseError: If the file is not a valid scheme.
        """
        return load_scheme_file(Path(record.path))
