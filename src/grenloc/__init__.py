"""GrenLoc - Grenada digital location codes.

Architecture::

    reference/     Static catalogs and constants (parish boxes, grid parameters)
    codec/         Pure encode/decode core (classifier, quantizer, formatter, decoder)
    renderers/     Pure data -> text/HTML (summary, share message, printable sticker)
    presenters.py  Presenter capability the core hands results to
    services/      Shared HTTP client and the place-name geocoder
    cli.py         ``grenloc`` command-line entry point

Data flow: coordinate -> codec.encode -> EncodedLocation -> presenter

Extension points:
  - Polygon parish boundaries: codec/classifier.py (``get_classifier``)
  - New output surface:        presenters.py (``Presenter`` protocol)
"""

__version__ = "0.1.0"

from grenloc.codec import decode, encode, format_code
from grenloc.config import Settings
from grenloc.schemas import Coordinate, EncodedLocation, Parish

__all__ = [
    "Coordinate",
    "EncodedLocation",
    "Parish",
    "Settings",
    "__version__",
    "decode",
    "encode",
    "format_code",
]
