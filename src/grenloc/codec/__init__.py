"""Location code core.

Pure, stateless functions; the only shared data is the read-only parish
catalog.

Public API:
  - classifier: ParishClassifier, BoundingBoxClassifier, classify, get_classifier
  - quantizer: quantize
  - formatter: format_code
  - decoder: parse_code, decode
  - pipeline: encode, locate, maps_url, normalize_code
"""

from grenloc.codec.classifier import (
    BoundingBoxClassifier,
    ParishClassifier,
    classify,
    get_classifier,
)
from grenloc.codec.decoder import decode, parse_code
from grenloc.codec.formatter import format_code
from grenloc.codec.pipeline import encode, locate, maps_url, normalize_code
from grenloc.codec.quantizer import quantize

__all__ = [
    "BoundingBoxClassifier",
    "ParishClassifier",
    "classify",
    "decode",
    "encode",
    "format_code",
    "get_classifier",
    "locate",
    "maps_url",
    "normalize_code",
    "parse_code",
    "quantize",
]
