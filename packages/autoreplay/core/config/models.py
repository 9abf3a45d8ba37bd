"""Configuration models for AutoReplay generators.

A ``GeneratorConfig`` is the named parameter bundle a preset resolves to.
It is read-only input to every pipeline stage.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OrderingPolicy(BaseModel):
    """Direction flags for the spin marker tie-breaks in event ordering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    spin_start_first: bool = Field(
        default=True, description="Same-time spin starts sort before other events"
    )
    spin_end_last: bool = Field(
        default=True, description="Same-time spin ends sort after other events"
    )


class ReleaseConfig(BaseModel):
    """Button release hysteresis.

    Example:
        >>> release = ReleaseConfig()
        >>> release.wait   # 150.0
        >>> release.delay  # 50.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    wait: float = Field(
        default=150.0, ge=0.0, description="Idle gap (ms) after which a held button is released"
    )
    delay: float = Field(
        default=50.0, ge=0.0, description="Release happens this long (ms) after the last event"
    )
    anti_rebind_offset: float = Field(
        default=20.0,
        gt=0.0,
        description="Spacing (ms) of the parked samples inserted before the next event",
    )
    anti_rebind_time: float = Field(
        default=16.0,
        ge=0.0,
        description="Minimum distance (ms) between a release and a parked sample",
    )


class FollowConfig(BaseModel):
    """Hold path following between checkpoints."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=True, description="Trace uninterrupted hold paths")
    interval: float = Field(default=16.0, gt=0.0, description="Sampling interval (ms)")


class SpinConfig(BaseModel):
    """Spin zone simulation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    radius: float = Field(default=50.0, gt=0.0, description="Radius around the spin centre")
    rotation_rate: float = Field(
        default=0.05, gt=0.0, description="Angular speed in radians per millisecond"
    )
    step_ms: float = Field(default=10.0, gt=0.0, description="Sub-step between spin samples")


class HumanizeConfig(BaseModel):
    """Trajectory humanization post-pass."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=False, description="Resample the trajectory through splines")
    bounce: bool = Field(
        default=True, description="Reflect interpolated positions back into the playfield"
    )
    step_ms: float = Field(default=25.0, gt=0.0, description="Resampling step (ms)")
    jump_threshold: float = Field(
        default=80.0,
        ge=0.0,
        description="Source samples closer than this (ms) are passed through uninterpolated",
    )
    coerce_taps: bool = Field(
        default=True, description="Keep interpolation near hit positions around hits"
    )
    coerce_holds: bool = Field(
        default=True, description="Keep interpolation near the segment between hold samples"
    )
    coerce_radius: float = Field(default=32.0, gt=0.0, description="Coercion radius")
    coerce_window_ms: float = Field(
        default=60.0, ge=0.0, description="Time window around hits where tap coercion applies"
    )


class GeneratorConfig(BaseModel):
    """Complete parameter bundle for one generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(default="default", description="Preset or bundle name")
    reaction_time: float = Field(
        default=0.0,
        description=(
            "Reaction lead (ms) before each event. Negative values are a fraction "
            "of the element preempt (e.g. -0.1 = 10% of preempt)"
        ),
    )
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)
    follow: FollowConfig = Field(default_factory=FollowConfig)
    spin: SpinConfig = Field(default_factory=SpinConfig)
    humanize: HumanizeConfig = Field(default_factory=HumanizeConfig)
    ordering: OrderingPolicy = Field(default_factory=OrderingPolicy)
    legacy_last_tick_offset: float | None = Field(
        default=None,
        description="Overrides every hold path's legacy last-tick offset when set",
    )
