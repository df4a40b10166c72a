# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Select a broadcasting strategy for a pair of shapes.

Strategies are tried in a fixed order: equal shapes, a single-element
operand, same-rank compatible shapes, and finally shapes that agree over
their trailing axes. Each operand receives its own stride table so the
operands are never reordered.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .errors import ShapeBroadcastError
from .shape import Shape

logger = logging.getLogger(__name__)


class Strategy(str, enum.Enum):
    EQUAL = "equal"
    SCALAR = "scalar"
    COMPATIBLE = "compatible"
    LAST_DIMS = "last_dims"


@dataclass(frozen=True)
class BroadcastPlan:
    """Output shape and per-operand strides for one binary operation.

    ``strides_a`` and ``strides_b`` are ``None`` for :attr:`Strategy.EQUAL`,
    where both operands are read at the output index directly. For
    :attr:`Strategy.SCALAR`, ``scalar_operand`` is 0 or 1 and names the
    single-element operand.
    """

    output_shape: Shape
    strategy: Strategy
    strides_a: Optional[Tuple[int, ...]] = None
    strides_b: Optional[Tuple[int, ...]] = None
    scalar_operand: Optional[int] = None

    @property
    def size(self) -> int:
        return self.output_shape.size

    @property
    def rank(self) -> int:
        return self.output_shape.rank


def pad_dims(dims: Sequence[int], rank: int) -> Tuple[int, ...]:
    """Prefix ``dims`` with 1s until it has ``rank`` axes."""
    dims = tuple(dims)
    return (1,) * (rank - len(dims)) + dims


def broadcast_strides(shape: Union[Shape, Sequence[int]], rank: int) -> Tuple[int, ...]:
    """Element strides of ``shape`` read against an output of ``rank`` axes.

    Size-1 axes (including the implicit leading ones) get stride 0 so every
    output position along them reads the same source slice.
    """
    dims = pad_dims(shape, rank)
    strides = [0] * rank
    running = 1
    for axis in range(rank - 1, -1, -1):
        strides[axis] = 0 if dims[axis] == 1 else running
        running *= dims[axis]
    return tuple(strides)


def resolve_broadcast(
    a: Union[Shape, Sequence[int]], b: Union[Shape, Sequence[int]]
) -> BroadcastPlan:
    """Resolve the broadcast plan for operand shapes ``a`` and ``b``.

    Raises:
        ShapeBroadcastError: No strategy applies.
    """
    a = a if isinstance(a, Shape) else Shape(a)
    b = b if isinstance(b, Shape) else Shape(b)

    if a.equal_to(b):
        plan = BroadcastPlan(a, Strategy.EQUAL)
    elif a.size == 1 or b.size == 1:
        rank = max(a.rank, b.rank)
        scalar_operand = 0 if a.size == 1 else 1
        other = b if scalar_operand == 0 else a
        plan = BroadcastPlan(
            Shape(pad_dims(other, rank)),
            Strategy.SCALAR,
            broadcast_strides(a, rank),
            broadcast_strides(b, rank),
            scalar_operand,
        )
    elif a.compatible_with(b):
        output = Shape([max(x, y) for x, y in zip(a, b)])
        plan = BroadcastPlan(
            output,
            Strategy.COMPATIBLE,
            broadcast_strides(a, a.rank),
            broadcast_strides(b, b.rank),
        )
    elif a.equal_with_last_dims(b):
        output = a if a.rank >= b.rank else b
        plan = BroadcastPlan(
            output,
            Strategy.LAST_DIMS,
            broadcast_strides(a, output.rank),
            broadcast_strides(b, output.rank),
        )
    else:
        raise ShapeBroadcastError(a.dims, b.dims)

    logger.debug(
        "broadcast %s x %s -> %s (%s)", a, b, plan.output_shape, plan.strategy.value
    )
    return plan


__all__ = [
    "Strategy",
    "BroadcastPlan",
    "pad_dims",
    "broadcast_strides",
    "resolve_broadcast",
]
