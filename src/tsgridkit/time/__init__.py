"""Time utilities: interval taxonomy, inference and grid arithmetic."""

from tsgridkit.time.arithmetic import Grid, snap_down, snap_up, step
from tsgridkit.time.inference import infer_interval, observed_index
from tsgridkit.time.sequence import count_points, generate_sequence, sequence_index
from tsgridkit.time.taxonomy import GRANULARITIES, Granularity, Interval, parse_interval

__all__ = [
    # Taxonomy
    "GRANULARITIES",
    "Granularity",
    "Interval",
    "parse_interval",
    # Inference
    "infer_interval",
    "observed_index",
    # Arithmetic
    "Grid",
    "snap_down",
    "snap_up",
    "step",
    # Sequences
    "count_points",
    "generate_sequence",
    "sequence_index",
]
