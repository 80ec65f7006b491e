"""zonegeo geometry engine: validation, overlap and metrics for map zones."""

from zonegeo.engine.config import DEFAULT_CONFIG, EngineConfig
from zonegeo.engine.guard import would_self_intersect
from zonegeo.engine.metrics import ShapeMetrics, area, bounding_box_area, centroid, metrics
from zonegeo.engine.normalizer import NormalizedRing, normalize_point, normalize_ring, shape_from_raw
from zonegeo.engine.overlap import OverlapResult, check_overlap, ensure_no_overlap
from zonegeo.engine.segments import segments_intersect

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "NormalizedRing",
    "OverlapResult",
    "ShapeMetrics",
    "area",
    "bounding_box_area",
    "centroid",
    "check_overlap",
    "ensure_no_overlap",
    "metrics",
    "normalize_point",
    "normalize_ring",
    "segments_intersect",
    "shape_from_raw",
    "would_self_intersect",
]
