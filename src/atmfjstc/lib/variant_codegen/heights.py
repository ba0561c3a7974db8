"""
Assigns draw heights to variants, for a renderer that composites layers by height.

Each *pass* hands out one height per variant slot, in declaration order, starting from a given height and going up by a
fixed interval. Passes are chained: each starts where the previous one ended, plus an optional gap that reserves
heights for things that are not variants (e.g. a clip overlay). Thus anything allocated by a later pass draws strictly
above everything allocated by an earlier one.

Heights are computed as ``start + index * interval`` for each band rather than by accumulating additions, and the final
result is verified to be strictly increasing. A violation (e.g. due to a degenerate interval, or floating point
precision running out) raises `HeightAllocationError` instead of silently producing overlapping heights.
"""

import logging

from dataclasses import dataclass
from typing import Tuple, Sequence, Dict

from atmfjstc.lib.variant_codegen.errors import HeightAllocationError
from atmfjstc.lib.variant_codegen.model import VariantSlot, VariantList


LOG = logging.getLogger()


@dataclass(frozen=True)
class HeightBand:
    start: float
    interval: float
    count: int

    def value(self, index: int) -> float:
        return self.start + index * self.interval

    @property
    def end(self) -> float:
        """The first height after the band (i.e. the next available start)"""
        return self.start + self.interval * self.count


@dataclass(frozen=True)
class HeightAllocation:
    bands: Tuple[HeightBand, ...]
    heights: Tuple[Tuple[VariantSlot, float], ...]
    "(slot, height) pairs in allocation order"

    next_start: float

    def by_identifier(self) -> Dict[str, float]:
        """Maps every identifier (aliases included) to its height"""
        return {identifier: height for slot, height in self.heights for identifier in slot.identifiers()}

    def values(self) -> Tuple[float, ...]:
        return tuple(height for _, height in self.heights)


def allocate(
    sections: Sequence[VariantList], start: float, interval: float, section_gap: float = 0.0
) -> HeightAllocation:
    """
    Assigns one height per variant slot across a number of sections.

    Args:
        sections: The sections, in the order in which heights should be allocated.
        start: The height given to the first slot of the first section.
        interval: The difference between the heights of two consecutive slots in a section. Must be positive.
        section_gap: Extra space inserted between the end of a section and the start of the next.

    Returns:
        A `HeightAllocation` with one band per section. Its `next_start` is the first height after the last band,
        suitable as the `start` of a subsequent allocation.
    """
    if interval <= 0:
        raise HeightAllocationError(f"Height interval must be positive (is: {interval})")
    if section_gap < 0:
        raise HeightAllocationError(f"Section gap cannot be negative (is: {section_gap})")

    bands = []
    heights = []
    cursor = start

    for index, section in enumerate(sections):
        if index > 0:
            cursor += section_gap

        band = HeightBand(start=cursor, interval=interval, count=len(section))
        bands.append(band)

        for slot_index, slot in enumerate(section):
            heights.append((slot, band.value(slot_index)))

        cursor = band.end

    allocation = HeightAllocation(bands=tuple(bands), heights=tuple(heights), next_start=cursor)

    _check_strictly_increasing(allocation.values(), f"allocation starting at {start}")

    if len(heights) > 0:
        LOG.debug(f"Allocated {len(heights)} heights in [{heights[0][1]}, {heights[-1][1]}]")

    return allocation


@dataclass(frozen=True)
class LayerPass:
    name: str
    sections: Tuple[VariantList, ...]
    interval: float
    gap_before: float = 0.0
    "Room left between the end of the previous pass and the start of this one"

    reserved: int = 0
    """
    How many heights in the gap are reserved for things that are not variants. They continue the progression of the
    previous pass (or of this one, if it is the first), and must all fit strictly below the start of this pass.
    """


@dataclass(frozen=True)
class LayerAllocation:
    passes: Tuple[Tuple[LayerPass, HeightAllocation], ...]
    start: float

    def __getitem__(self, name: str) -> HeightAllocation:
        return self.passes[self._index_of(name)][1]

    def start_of(self, name: str) -> float:
        """The start height of a pass, i.e. where its first band begins (after its reserved gap)"""
        allocation = self[name]

        return allocation.bands[0].start if len(allocation.bands) > 0 else allocation.next_start

    def reserved_before(self, name: str) -> float:
        """The first height of the gap reserved just before a pass (i.e. the previous pass's next start)"""
        index = self._index_of(name)

        return self.passes[index - 1][1].next_start if index > 0 else self.start

    def reserved_heights(self, name: str) -> Tuple[float, ...]:
        """All the heights reserved in the gap before a pass, in increasing order"""
        index = self._index_of(name)
        layer_pass = self.passes[index][0]
        interval = self.passes[index - 1][0].interval if index > 0 else layer_pass.interval
        first = self.reserved_before(name)

        return tuple(first + i * interval for i in range(layer_pass.reserved))

    def all_heights(self) -> Tuple[float, ...]:
        """Every height handed out, reserved ones included, in pipeline order"""
        return tuple(
            height
            for layer_pass, allocation in self.passes
            for height in (*self.reserved_heights(layer_pass.name), *allocation.values())
        )

    @property
    def next_start(self) -> float:
        return self.passes[-1][1].next_start

    def _index_of(self, name: str) -> int:
        for index, (layer_pass, _) in enumerate(self.passes):
            if layer_pass.name == name:
                return index

        raise KeyError(name)


def allocate_layers(passes: Sequence[LayerPass], start: float) -> LayerAllocation:
    """
    Runs a pipeline of allocation passes, each starting where the previous one ended (plus its `gap_before`).

    Raises:
        HeightAllocationError: If the pipeline is empty, a gap is negative or too small for the heights reserved in it,
            or any two heights in it end up equal.
    """
    if len(passes) == 0:
        raise HeightAllocationError("At least one allocation pass is required")

    results = []
    cursor = start
    previous_interval = passes[0].interval

    for layer_pass in passes:
        if layer_pass.gap_before < 0:
            raise HeightAllocationError(f"Gap before pass '{layer_pass.name}' cannot be negative")
        if layer_pass.reserved < 0:
            raise HeightAllocationError(f"Reserved height count for pass '{layer_pass.name}' cannot be negative")

        reserved_span = (layer_pass.reserved - 1) * previous_interval
        if (layer_pass.reserved > 0) and not (layer_pass.gap_before > reserved_span):
            raise HeightAllocationError(
                f"Gap before pass '{layer_pass.name}' ({layer_pass.gap_before}) is too small for its "
                f"{layer_pass.reserved} reserved heights (must exceed {reserved_span})"
            )

        allocation = allocate(layer_pass.sections, cursor + layer_pass.gap_before, layer_pass.interval)
        results.append((layer_pass, allocation))
        cursor = allocation.next_start
        previous_interval = layer_pass.interval

        LOG.debug(f"Pass '{layer_pass.name}' allocated {len(allocation.heights)} heights, next start {cursor}")

    layers = LayerAllocation(tuple(results), start)

    _check_strictly_increasing(layers.all_heights(), "layer pipeline")

    return layers


def _check_strictly_increasing(values: Sequence[float], what: str):
    for prev, current in zip(values, values[1:]):
        if not (current > prev):
            raise HeightAllocationError(f"Heights in {what} are not strictly increasing: {prev} followed by {current}")
