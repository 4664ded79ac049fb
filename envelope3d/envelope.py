"""Axis-aligned 3D bounding box ("envelope") used to track spatial extents.

An `Envelope3D` holds six bounds, the min and max along x, y and z. 2D data is
represented with a zero-thickness z range.

The envelope with all six bounds equal to zero doubles as the "empty"
envelope, i.e. no extent has been accumulated yet. Note that this makes a
degenerate envelope sitting at the origin indistinguishable from an empty one;
`merge_envelope`, `merge_point` and `intersect` all treat such an envelope as
empty.
"""
from typing import Any, Mapping, Optional, Tuple

import logging

import numpy as np

from envelope3d.error import EnvelopeError

logger = logging.getLogger(__name__)

# Names of the bounds in the external (camelCase) structure, in the same order
# as `Envelope3D.bounds`.
BOUND_NAMES = ("minX", "minY", "minZ", "maxX", "maxY", "maxZ")

_ATTR_NAMES = {
    "minX": "min_x",
    "minY": "min_y",
    "minZ": "min_z",
    "maxX": "max_x",
    "maxY": "max_y",
    "maxZ": "max_z",
}
_Z_NAMES = ("minZ", "maxZ")

# Anything exposing the six bounds: an `Envelope3D`, a mapping with camelCase
# keys or an object with the bounds as attributes.
EnvelopeLike = Any


def _lookup_bound(source: EnvelopeLike, name: str) -> Optional[float]:
    if isinstance(source, Mapping):
        return source.get(name)
    value = getattr(source, _ATTR_NAMES[name], None)
    if value is None:
        value = getattr(source, name, None)
    return value


def _read_bounds(source: EnvelopeLike) -> Tuple[float, ...]:
    """Reads the six bounds out of an envelope-like object.

    Args:
        source: Envelope-like object. `minZ` and `maxZ` may be missing, in which
            case they are taken to be zero.

    Returns:
        Tuple `(min_x, min_y, min_z, max_x, max_y, max_z)`.

    Raises:
        EnvelopeError: If one of the x or y bounds is missing.
    """
    if isinstance(source, Envelope3D):
        return source.bounds

    bounds = []
    for name in BOUND_NAMES:
        value = _lookup_bound(source, name)
        if value is None:
            if name not in _Z_NAMES:
                raise EnvelopeError(
                    "Envelope source is missing bound {}, got {}".format(
                        name, source))
            value = 0
        bounds.append(value)
    return tuple(bounds)


class Envelope3D:
    """Mutable axis-aligned 3D bounding box.

    Constructing an `Envelope3D` without arguments gives the empty envelope
    (all bounds zero). The bounds are trusted as given: no check is made that
    each min is below the corresponding max. Use `validate` for that.

    Attributes:
        min_x: Lower bound along x.
        min_y: Lower bound along y.
        min_z: Lower bound along z.
        max_x: Upper bound along x.
        max_y: Upper bound along y.
        max_z: Upper bound along z.
    """

    def __init__(self,
                 min_x: float = 0,
                 min_y: float = 0,
                 min_z: Optional[float] = None,
                 max_x: float = 0,
                 max_y: float = 0,
                 max_z: Optional[float] = None) -> None:
        """Creates a new envelope.

        Args:
            min_x: Lower bound along x.
            min_y: Lower bound along y.
            min_z: Lower bound along z. Defaults to zero for 2D extents.
            max_x: Upper bound along x.
            max_y: Upper bound along y.
            max_z: Upper bound along z. Defaults to zero for 2D extents.
        """
        self.min_x = min_x
        self.min_y = min_y
        self.min_z = 0 if min_z is None else min_z
        self.max_x = max_x
        self.max_y = max_y
        self.max_z = 0 if max_z is None else max_z

    @classmethod
    def from_bounds(cls, source: Optional[EnvelopeLike]) -> "Envelope3D":
        """Creates an envelope by copying the bounds of `source`.

        Args:
            source: Envelope-like object, e.g. `{"minX": 0, "minY": 0,
                "maxX": 10, "maxY": 10}`. Missing z bounds default to zero.
                If `None`, the empty envelope is returned.

        Returns:
            The new envelope.

        Raises:
            EnvelopeError: If `source` is missing an x or y bound.
        """
        if source is None:
            return cls()
        return cls(*_read_bounds(source))

    @classmethod
    def from_points(cls, points: np.ndarray) -> "Envelope3D":
        """Computes the envelope enclosing a set of points.

        The bounds are the per-axis min and max over all points. Unlike folding
        the points in with `merge_point`, a point at the origin is not mistaken
        for the empty envelope.

        Args:
            points: Array-like of shape `(N, 2)` or `(N, 3)`. 2D points are
                placed at `z = 0`.

        Returns:
            The envelope of the points, or the empty envelope if there are no
            points.

        Raises:
            EnvelopeError: If `points` does not have a valid shape.
        """
        points = np.asarray(points, dtype=float)
        if points.size == 0:
            logger.debug("No points given, returning empty envelope.")
            return cls()
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise EnvelopeError(
                "Points must have shape (N, 2) or (N, 3), got {}".format(
                    points.shape))

        lower = points.min(axis=0)
        upper = points.max(axis=0)
        if points.shape[1] == 2:
            lower = np.append(lower, 0)
            upper = np.append(upper, 0)
        return cls(*[float(v) for v in lower], *[float(v) for v in upper])

    @property
    def bounds(self) -> Tuple[float, ...]:
        """Bounds as `(min_x, min_y, min_z, max_x, max_y, max_z)`."""
        return (self.min_x, self.min_y, self.min_z, self.max_x, self.max_y,
                self.max_z)

    @property
    def min_corner(self) -> np.ndarray:
        return np.array([self.min_x, self.min_y, self.min_z], dtype=float)

    @property
    def max_corner(self) -> np.ndarray:
        return np.array([self.max_x, self.max_y, self.max_z], dtype=float)

    @property
    def center(self) -> np.ndarray:
        """Gets the center coordinate of the envelope."""
        return (self.min_corner + self.max_corner) / 2

    @property
    def extents(self) -> np.ndarray:
        """Computes the length of the envelope along x, y and z."""
        return self.max_corner - self.min_corner

    def is_empty(self) -> bool:
        """Returns `True` if all six bounds are zero."""
        return all(bound == 0 for bound in self.bounds)

    def merge_envelope(self, other: EnvelopeLike) -> None:
        """Expands the envelope to also cover `other`.

        If this envelope is empty, it simply takes on the bounds of `other`.

        Args:
            other: Envelope-like object to merge in. It is not modified.
        """
        (other_min_x, other_min_y, other_min_z, other_max_x, other_max_y,
         other_max_z) = _read_bounds(other)
        if self.is_empty():
            self.min_x = other_min_x
            self.min_y = other_min_y
            self.min_z = other_min_z
            self.max_x = other_max_x
            self.max_y = other_max_y
            self.max_z = other_max_z
        else:
            self.min_x = min(other_min_x, self.min_x)
            self.min_y = min(other_min_y, self.min_y)
            self.min_z = min(other_min_z, self.min_z)
            self.max_x = max(other_max_x, self.max_x)
            self.max_y = max(other_max_y, self.max_y)
            self.max_z = max(other_max_z, self.max_z)

    def merge_point(self, x: float, y: float, z: float = 0) -> None:
        """Expands the envelope to also cover the point `(x, y, z)`.

        If this envelope is empty, it collapses onto the point.
        """
        if self.is_empty():
            self.min_x = self.max_x = x
            self.min_y = self.max_y = y
            self.min_z = self.max_z = z
        else:
            self.min_x = min(x, self.min_x)
            self.min_y = min(y, self.min_y)
            self.min_z = min(z, self.min_z)
            self.max_x = max(x, self.max_x)
            self.max_y = max(y, self.max_y)
            self.max_z = max(z, self.max_z)

    def intersects(self, other: EnvelopeLike) -> bool:
        """Checks whether the two envelopes overlap.

        Boundaries are inclusive, so envelopes that merely touch intersect.
        """
        (other_min_x, other_min_y, other_min_z, other_max_x, other_max_y,
         other_max_z) = _read_bounds(other)
        return (self.min_x <= other_max_x and self.max_x >= other_min_x and
                self.min_y <= other_max_y and self.max_y >= other_min_y and
                self.min_z <= other_max_z and self.max_z >= other_min_z)

    def intersect(self, other: EnvelopeLike) -> None:
        """Shrinks the envelope to its overlap with `other`.

        If the envelopes do not intersect, this envelope becomes empty. An
        empty envelope that intersects `other` (i.e. `other` reaches the
        origin) takes on the bounds of `other`.

        Args:
            other: Envelope-like object to intersect with. It is not modified.
        """
        if not self.intersects(other):
            logger.debug("No overlap with %s, collapsing %s to empty envelope.",
                         other, self)
            self.min_x = self.max_x = 0
            self.min_y = self.max_y = 0
            self.min_z = self.max_z = 0
            return

        (other_min_x, other_min_y, other_min_z, other_max_x, other_max_y,
         other_max_z) = _read_bounds(other)
        if self.is_empty():
            self.min_x = other_min_x
            self.min_y = other_min_y
            self.min_z = other_min_z
            self.max_x = other_max_x
            self.max_y = other_max_y
            self.max_z = other_max_z
        else:
            self.min_x = max(other_min_x, self.min_x)
            self.min_y = max(other_min_y, self.min_y)
            self.min_z = max(other_min_z, self.min_z)
            self.max_x = min(other_max_x, self.max_x)
            self.max_y = min(other_max_y, self.max_y)
            self.max_z = min(other_max_z, self.max_z)

    def contains(self, other: EnvelopeLike) -> bool:
        """Checks whether `other` lies entirely within this envelope.

        Boundaries are inclusive, so every envelope contains itself.
        """
        (other_min_x, other_min_y, other_min_z, other_max_x, other_max_y,
         other_max_z) = _read_bounds(other)
        return (self.min_x <= other_min_x and self.min_y <= other_min_y and
                self.min_z <= other_min_z and self.max_x >= other_max_x and
                self.max_y >= other_max_y and self.max_z >= other_max_z)

    def merged(self, other: EnvelopeLike) -> "Envelope3D":
        """Same as `merge_envelope` but returns a new envelope."""
        result = self.copy()
        result.merge_envelope(other)
        return result

    def merged_point(self, x: float, y: float, z: float = 0) -> "Envelope3D":
        """Same as `merge_point` but returns a new envelope."""
        result = self.copy()
        result.merge_point(x, y, z)
        return result

    def intersection(self, other: EnvelopeLike) -> "Envelope3D":
        """Same as `intersect` but returns a new envelope."""
        result = self.copy()
        result.intersect(other)
        return result

    def validate(self) -> None:
        """Checks that the bounds are numbers and ordered along every axis.

        Raises:
            EnvelopeError: If a bound is NaN or a min exceeds its max.
        """
        if np.any(np.isnan(np.array(self.bounds, dtype=float))):
            raise EnvelopeError("Envelope has NaN bounds, got {}".format(self))
        for axis in "xyz":
            lower = getattr(self, "min_" + axis)
            upper = getattr(self, "max_" + axis)
            if lower > upper:
                raise EnvelopeError(
                    "Envelope min_{0} exceeds max_{0}, got {1} > {2}".format(
                        axis, lower, upper))

    def copy(self) -> "Envelope3D":
        return Envelope3D(*self.bounds)

    def to_dict(self) -> dict:
        """Returns the bounds as a dictionary keyed by camelCase bound name."""
        return dict(zip(BOUND_NAMES, self.bounds))

    def __copy__(self) -> "Envelope3D":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Envelope3D):
            return NotImplemented
        return self.bounds == other.bounds

    # Envelopes are mutable.
    __hash__ = None

    def __repr__(self) -> str:
        return ("Envelope3D(min_x={}, min_y={}, min_z={}, max_x={}, max_y={}, "
                "max_z={})").format(*self.bounds)
