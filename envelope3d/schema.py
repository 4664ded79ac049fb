"""Defines the serialized form of an envelope.

An envelope is stored as a single object with the six bounds keyed by their
camelCase names, e.g.

```json
{"minX": 0, "minY": 0, "minZ": 0, "maxX": 10, "maxY": 10, "maxZ": 2}
```

`minZ` and `maxZ` may be omitted for 2D extents.
"""
from typing import List, TextIO, Union

import json
import logging

from schematics import exceptions
from schematics import models
from schematics import types
import yaml

from envelope3d.envelope import Envelope3D
from envelope3d.error import EnvelopeError

logger = logging.getLogger(__name__)


class EnvelopeSchema(models.Model):
    """Schema for the six bounds of an envelope.

    Attributes:
        minX: Lower bound along x.
        minY: Lower bound along y.
        minZ: Lower bound along z.
        maxX: Upper bound along x.
        maxY: Upper bound along y.
        maxZ: Upper bound along z.
    """
    minX = types.FloatType(required=True)
    minY = types.FloatType(required=True)
    minZ = types.FloatType(default=0)
    maxX = types.FloatType(required=True)
    maxY = types.FloatType(required=True)
    maxZ = types.FloatType(default=0)


def to_schema(envelope: Envelope3D) -> EnvelopeSchema:
    return EnvelopeSchema(envelope.to_dict())


def from_schema(schema: EnvelopeSchema) -> Envelope3D:
    """Validates `schema` and converts it into an `Envelope3D`.

    Raises:
        EnvelopeError: If `schema` does not validate.
    """
    try:
        schema.validate()
    except exceptions.DataError as exc:
        raise EnvelopeError("Invalid envelope: {}".format(
            exc.to_primitive())) from exc
    return Envelope3D.from_bounds(schema.to_native())


def _parse(data: Union[dict, List[dict]]) -> Envelope3D:
    if isinstance(data, list):
        envelope = Envelope3D()
        for item in data:
            envelope.merge_envelope(_parse(item))
        return envelope

    if not isinstance(data, dict):
        raise EnvelopeError(
            "Envelope must be a mapping of bounds, got {}".format(data))
    try:
        schema = EnvelopeSchema(data, strict=True)
    except exceptions.DataError as exc:
        raise EnvelopeError("Invalid envelope: {}".format(
            exc.to_primitive())) from exc
    return from_schema(schema)


def loads(serialized: str) -> Envelope3D:
    """Loads a JSON serialized envelope.

    Args:
        serialized: JSON object with the bounds.

    Returns:
        The envelope.

    Raises:
        EnvelopeError: If the bounds are missing or not numbers.
    """
    envelope = _parse(json.loads(serialized))
    logger.debug("Loaded %s.", envelope)
    return envelope


def dumps(envelope: Envelope3D) -> str:
    """Serializes `envelope` into a JSON string."""
    return json.dumps(to_schema(envelope).to_primitive())


def load_yaml(stream: Union[str, TextIO]) -> Envelope3D:
    """Loads an envelope from a YAML document.

    The document is either a single mapping of bounds or a list of such
    mappings. A list is merged into a single envelope covering all of its
    entries.

    Args:
        stream: YAML string or open file.

    Returns:
        The envelope.

    Raises:
        EnvelopeError: If the document does not describe an envelope.
    """
    envelope = _parse(yaml.safe_load(stream))
    logger.debug("Loaded %s from YAML.", envelope)
    return envelope
