"""
Axis-aligned 3D bounding boxes ("envelopes")

Tracks the spatial extent of geometric data and tests spatial relationships
(overlap, containment) between extents. An envelope is a mutable value with
six bounds; 2D extents use a zero-thickness z range.


Dependencies:
- numpy
- schematics    [envelope3d.schema]
- pyyaml        [envelope3d.schema.load_yaml]
"""
LOG_FORMAT = "[%(asctime)-15s][%(levelname)s][%(module)s][%(funcName)s] %(message)s"

from envelope3d.error import EnvelopeError
from envelope3d.envelope import BOUND_NAMES
from envelope3d.envelope import Envelope3D
