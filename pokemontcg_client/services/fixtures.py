"""
Loads recorded API responses from disk.

Recorded envelopes are handy as offline test data and for replaying a
previous export without hitting the API.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..interfaces.query import Resource
from ..models.envelopes import MultiEnvelope, SingleEnvelope
from ..models.errors import FailedOpeningFile, FailedParsingFile
from ..models.resource import ResourceKind

logger = logging.getLogger(__name__)


def load_envelope(path: Union[str, Path], resource: Resource, many: bool = False):
    """
    Read a recorded envelope file and return its unwrapped payload.

    Args:
        path: JSON file holding {"data": ...}
        resource: Resource kind the payload belongs to
        many: True for a multi-item envelope ({"data": [...]})

    Returns:
        A single payload, or a list of payloads when many is True

    Raises:
        FailedOpeningFile: if the file cannot be read
        FailedParsingFile: if the content is not the expected envelope
    """
    kind = ResourceKind.of(resource)
    envelope_type = MultiEnvelope[kind.model] if many else SingleEnvelope[kind.model]

    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        logger.error(f"Cannot open {path}: {e}")
        raise FailedOpeningFile(path=str(path)) from e

    try:
        envelope = envelope_type.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Cannot parse {path} as {kind.path} envelope: {e.error_count()} error(s)")
        raise FailedParsingFile(path=str(path)) from e

    return envelope.data
