"""Block loading and the passage segmentation state machine."""

from .blocks import load_blocks, normalize_blocks
from .builder import PassageBuilder, ScanState, emit_and_carry_overlap

__all__ = ["PassageBuilder", "ScanState", "emit_and_carry_overlap", "load_blocks", "normalize_blocks"]
