# ==============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Rolling Stock Scale Classifier
==============================

Suggests a uniform scale that brings an imported model to OO gauge size,
and guesses what kind of rolling stock it is.

Two policies are available for models without a type hint:

LENGTH_BANDED (default)
    Raw length (longest horizontal extent) picks the type:
        > 0.5 m     coach       (confidence 0.7)
        0.3-0.5 m   locomotive  (confidence 0.6)
        otherwise   wagon       (confidence 0.6)
    Scale = target length of that type / raw length.

ABSOLUTE_SIZE
    Raw size in millimetres is compared with what an OO model should be:
        > 500 mm    scale down to body width
        20-100 mm   already OO, scale 1.0
        < 20 mm     scale up to body width
        100-500 mm  intermediate, scale to body width
    Body width scaling is target body width / X extent.

A type hint always scales to that type's target length, confidence 0.9.

Models with no measurable size get scale 1.0 and confidence 0.0.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..config import PlacementConfig, ScalePolicy
from ..constants import (
    COACH_MIN_LENGTH_M,
    LOCOMOTIVE_MIN_LENGTH_M,
    OO_RANGE_MAX_MM,
    OO_RANGE_MIN_MM,
    OVERSIZE_MIN_MM,
)
from ..logging_config import get_logger
from .bounds import ModelBounds

logger = get_logger(__name__)


class RollingStockType(Enum):
    """Kind of rolling stock a model represents."""
    LOCOMOTIVE = "locomotive"
    COACH = "coach"
    WAGON = "wagon"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ScaleClassifierResult:
    """
    Suggested scale for a model.

    Attributes:
        scale_factor: Uniform scale to apply (always > 0)
        detected_type: Detected or hinted stock type
        confidence: 0-1 confidence in the detection
        target_length: Length the model is scaled to (0 when not length based)
        original_length: Raw length of the model
        policy: Policy that produced the result (None for hinted results)
        reason: Short human-readable explanation
    """
    scale_factor: float
    detected_type: RollingStockType
    confidence: float
    target_length: float = 0.0
    original_length: float = 0.0
    policy: Optional[ScalePolicy] = None
    reason: str = ""


class ScaleClassifier:
    """
    Scale suggestion for imported rolling stock.

    Args:
        config: Placement configuration (target lengths, policy, body width)

    Example:
        >>> classifier = ScaleClassifier()
        >>> bounds = ModelBounds(Vector3(-0.05, 0, -0.3), Vector3(0.05, 0.1, 0.3))
        >>> result = classifier.classify(bounds)
        >>> result.detected_type
        <RollingStockType.COACH: 'coach'>
    """

    def __init__(self, config: Optional[PlacementConfig] = None):
        self.config = config or PlacementConfig()

    def classify(self, bounds: ModelBounds,
                 type_hint: Union[RollingStockType, str, None] = None) -> ScaleClassifierResult:
        """
        Suggest a scale for a model.

        Args:
            bounds: Unscaled model bounds
            type_hint: Known stock type, if any. Names are case-insensitive;
                unrecognised names are ignored

        Returns:
            ScaleClassifierResult
        """
        hint = self._parse_hint(type_hint)
        length = 0.0 if bounds.is_degenerate else bounds.max_horizontal

        if length <= 0:
            logger.warning("Model has no measurable length; leaving scale at 1.0")
            return ScaleClassifierResult(
                scale_factor=1.0,
                detected_type=hint or RollingStockType.UNKNOWN,
                confidence=0.0,
                original_length=length,
                reason="no measurable length",
            )

        if hint is not None:
            result = self._scale_to_length(length, hint, 0.9, None, "type hint")
        elif self.config.scale_policy == ScalePolicy.ABSOLUTE_SIZE:
            result = self._classify_absolute(bounds, length)
        else:
            result = self._classify_length_banded(length)

        logger.debug(
            "Auto-scale: %s (confidence %.0f%%), length %.1fmm, scale %.4f - %s",
            result.detected_type.value, result.confidence * 100,
            length * 1000, result.scale_factor, result.reason
        )
        return result

    def _parse_hint(self, type_hint) -> Optional[RollingStockType]:
        if type_hint is None:
            return None
        if isinstance(type_hint, str):
            try:
                hint = RollingStockType(type_hint.strip().lower())
            except ValueError:
                logger.warning("Unrecognised rolling stock type '%s'; ignoring hint", type_hint)
                return None
        else:
            hint = type_hint
        return None if hint == RollingStockType.UNKNOWN else hint

    def _scale_to_length(self, length: float, stock_type: RollingStockType, confidence: float,
                         policy: Optional[ScalePolicy], reason: str) -> ScaleClassifierResult:
        target = self.config.target_length(stock_type.value)
        return ScaleClassifierResult(
            scale_factor=target / length,
            detected_type=stock_type,
            confidence=confidence,
            target_length=target,
            original_length=length,
            policy=policy,
            reason=reason,
        )

    def _classify_length_banded(self, length: float) -> ScaleClassifierResult:
        if length > COACH_MIN_LENGTH_M:
            stock_type, confidence = RollingStockType.COACH, 0.7
        elif length > LOCOMOTIVE_MIN_LENGTH_M:
            stock_type, confidence = RollingStockType.LOCOMOTIVE, 0.6
        else:
            stock_type, confidence = RollingStockType.WAGON, 0.6
        return self._scale_to_length(
            length, stock_type, confidence, ScalePolicy.LENGTH_BANDED,
            f"length {length * 1000:.0f}mm suggests {stock_type.value}"
        )

    def _classify_absolute(self, bounds: ModelBounds, length: float) -> ScaleClassifierResult:
        size_mm = length * 1000
        policy = ScalePolicy.ABSOLUTE_SIZE

        if OO_RANGE_MIN_MM <= size_mm <= OO_RANGE_MAX_MM:
            return ScaleClassifierResult(
                scale_factor=1.0,
                detected_type=RollingStockType.LOCOMOTIVE,
                confidence=0.6,
                original_length=length,
                policy=policy,
                reason=f"already OO size ({size_mm:.0f}mm)",
            )

        if size_mm > OVERSIZE_MIN_MM:
            reason = f"scaling down (max dim {size_mm:.0f}mm > {OVERSIZE_MIN_MM:.0f}mm)"
        elif size_mm < OO_RANGE_MIN_MM:
            reason = f"scaling up (max dim {size_mm:.0f}mm < {OO_RANGE_MIN_MM:.0f}mm)"
        else:
            reason = f"intermediate scale ({size_mm:.0f}mm) - scaling to OO"

        width = bounds.width
        if width <= 0:
            logger.warning("Model has no width; leaving scale at 1.0")
            return ScaleClassifierResult(
                scale_factor=1.0,
                detected_type=RollingStockType.UNKNOWN,
                confidence=0.0,
                original_length=length,
                policy=policy,
                reason="no measurable width",
            )

        return ScaleClassifierResult(
            scale_factor=self.config.target_body_width / width,
            detected_type=RollingStockType.LOCOMOTIVE,
            confidence=0.5,
            original_length=length,
            policy=policy,
            reason=reason,
        )


__all__ = [
    "RollingStockType",
    "ScaleClassifierResult",
    "ScaleClassifier",
    "ScalePolicy",
]
