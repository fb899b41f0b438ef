"""World systems - footprints left by the creatures."""

from .footprints import Footprint, FootprintLedger
