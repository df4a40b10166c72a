# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""JSON and binary encodings of tensors.

The JSON form is ``{"dType": name, "shape": [...], "buffer": [...]}``.

The binary form is an ASCII JSON header ``{"dType": name, "shape": [...]}``
terminated by ``\\n``, followed by the raw little-endian element bytes.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import numpy as np

from .dtypes import as_dtype, require_numeric
from .errors import InvalidArgument, SerializationError, UnsupportedDType
from .tensor import Tensor

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_HEADER_END = b"\n"


def _check_header(data: Mapping[str, Any]) -> tuple:
    if not isinstance(data, Mapping) or "dType" not in data or "shape" not in data:
        raise SerializationError(
            "Expected 'dType' and 'shape' keys in serialized tensor header"
        )
    try:
        dtype = require_numeric(as_dtype(data["dType"]))
    except UnsupportedDType as exc:
        raise SerializationError(f"Unsupported serialized dtype {data['dType']!r}") from exc
    shape = data["shape"]
    if not isinstance(shape, list):
        raise SerializationError(f"Serialized shape must be a list, got {shape!r}")
    return dtype, shape


def to_json(tensor: Tensor) -> Dict[str, Any]:
    """Encode ``tensor`` as a JSON-compatible mapping."""
    return {
        "dType": tensor.dtype.value,
        "shape": tensor.shape.as_list(),
        "buffer": tensor.buffer.tolist(),
    }


def from_json(data: Union[Mapping[str, Any], str]) -> Tensor:
    """Decode a mapping (or JSON text) produced by :func:`to_json`."""
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Invalid tensor JSON: {exc}") from exc
    dtype, shape = _check_header(data)
    if "buffer" not in data or not isinstance(data["buffer"], list):
        raise SerializationError("Expected a 'buffer' list in serialized tensor")
    try:
        return Tensor(data["buffer"], shape, dtype)
    except (ValueError, TypeError, OverflowError) as exc:
        raise SerializationError(f"Invalid serialized tensor: {exc}") from exc


def to_bytes(tensor: Tensor) -> bytes:
    """Encode ``tensor`` as a header line followed by little-endian bytes."""
    header = json.dumps(
        {"dType": tensor.dtype.value, "shape": tensor.shape.as_list()},
        separators=(",", ":"),
    )
    little_endian = tensor.dtype.numpy.newbyteorder("<")
    payload = tensor.buffer.astype(little_endian, copy=False).tobytes()
    return header.encode("ascii") + _HEADER_END + payload


def from_bytes(data: Union[bytes, bytearray, memoryview]) -> Tensor:
    """Decode bytes produced by :func:`to_bytes`."""
    data = bytes(data)
    split = data.find(_HEADER_END)
    if split == -1:
        raise SerializationError("Missing header terminator in serialized tensor")
    try:
        header = json.loads(data[:split].decode("ascii"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SerializationError(f"Invalid tensor header: {exc}") from exc
    dtype, shape = _check_header(header)

    payload = data[split + 1 :]
    itemsize = dtype.itemsize
    if len(payload) % itemsize:
        raise SerializationError(
            f"Payload of {len(payload)} bytes is not a multiple of {itemsize}"
        )
    values = np.frombuffer(payload, dtype=dtype.numpy.newbyteorder("<"))
    try:
        return Tensor(values.astype(dtype.numpy), shape, dtype)
    except InvalidArgument as exc:
        raise SerializationError(f"Invalid serialized tensor: {exc}") from exc


def save(tensor: Tensor, path: PathLike, format: str = "bytes") -> None:
    """Write ``tensor`` to ``path`` in ``"bytes"`` or ``"json"`` format.

    The JSON format is strict: tensors holding ``nan`` or ``inf`` raise
    :class:`SerializationError` and must be saved as bytes.
    """
    target = Path(path)
    if format == "bytes":
        target.write_bytes(to_bytes(tensor))
    elif format == "json":
        try:
            text = json.dumps(to_json(tensor), allow_nan=False)
        except ValueError as exc:
            raise SerializationError(
                f"Non-finite values cannot be written as JSON: {exc}"
            ) from exc
        target.write_text(text + "\n", encoding="ascii")
    else:
        raise InvalidArgument(f"Unknown serialization format {format!r}")
    logger.debug("saved %s tensor %s to %s (%s)", tensor.dtype, tensor.shape, target, format)


def load(path: PathLike) -> Tensor:
    """Read a tensor written by :func:`save`, detecting its format."""
    source = Path(path)
    data = source.read_bytes()
    split = data.find(_HEADER_END)
    head = data if split == -1 else data[:split]
    try:
        header = json.loads(head.decode("ascii"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SerializationError(f"{source} does not hold a serialized tensor") from exc

    if isinstance(header, dict) and "buffer" in header:
        tensor = from_json(header)
    else:
        tensor = from_bytes(data)
    logger.debug("loaded %s tensor %s from %s", tensor.dtype, tensor.shape, source)
    return tensor


__all__ = ["to_json", "from_json", "to_bytes", "from_bytes", "save", "load"]
