"""End-to-end generation pipeline.

Elements flow through the stages in a fixed order:

    elements -> hold path validation -> timeline -> action samples -> (humanizer)

The pipeline is a pure function of (elements, configuration). Every
intermediate structure belongs to a single ``run`` call, so independent runs
(e.g. several presets) can execute side by side without coordination.
"""

from __future__ import annotations

from collections.abc import Sequence

from autoreplay.core.config.models import GeneratorConfig
from autoreplay.core.config.presets import Preset, config_for_preset
from autoreplay.core.diagnostics import DiagnosticLevel, EventSink, NullSink
from autoreplay.core.humanize.humanizer import TrajectoryHumanizer
from autoreplay.core.models.actions import ActionSample
from autoreplay.core.models.elements import Element
from autoreplay.core.synthesis.actions import ActionSynthesizer
from autoreplay.core.synthesis.reaction import (
    DEFAULT_PREEMPT_MS,
    preempt_from_approach_rate,
    resolve_reaction_time,
)
from autoreplay.core.timeline.builder import TimelineBuilder, validate_elements
from autoreplay.core.utils.logging import get_logger, log_performance


class ReplayPipeline:
    """Runs the generation stages for one configuration.

    Args:
        config: Generator configuration. Defaults to the DEFAULT preset.
        sink: Diagnostic event sink shared by every stage. Defaults to a
            no-op sink.

    Example:
        >>> pipeline = ReplayPipeline(config_for_preset(Preset.STIFF))
        >>> samples = pipeline.run(elements)
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        sink: EventSink | None = None,
    ) -> None:
        self.config = config or config_for_preset(Preset.DEFAULT)
        self.sink = sink or NullSink()
        self._log = get_logger(__name__, config=self.config.name)

    @log_performance
    def run(
        self,
        elements: Sequence[Element],
        approach_rate: float | None = None,
    ) -> list[ActionSample]:
        """Generate action samples for a start-time-sorted element list.

        Args:
            elements: Elements sorted ascending by start time.
            approach_rate: Difficulty approach rate, used to scale a negative
                reaction time when no element carries its own preempt.

        Returns:
            Time-ordered action samples (empty for empty input).

        Raises:
            MalformedHoldPathError: If a hold path has no usable checkpoints.
        """
        if not elements:
            return []

        validate_elements(elements, self.config.legacy_last_tick_offset)

        timeline = TimelineBuilder(self.config, self.sink).build(elements)

        fallback = (
            preempt_from_approach_rate(approach_rate)
            if approach_rate is not None
            else DEFAULT_PREEMPT_MS
        )
        reaction_time = resolve_reaction_time(self.config.reaction_time, elements, fallback)

        samples = ActionSynthesizer(self.config, reaction_time, self.sink).synthesize(timeline)

        if self.config.humanize.enabled:
            samples = TrajectoryHumanizer(self.config.humanize, self.sink).humanize(samples)

        self.sink.emit(
            "pipeline.completed",
            DiagnosticLevel.INFO,
            config=self.config.name,
            elements=len(elements),
            events=len(timeline),
            samples=len(samples),
            reaction_time=reaction_time,
        )
        self._log.info(f"Generated {len(samples)} samples from {len(elements)} elements")
        return samples


def generate_actions(
    elements: Sequence[Element],
    preset: Preset = Preset.DEFAULT,
    sink: EventSink | None = None,
    approach_rate: float | None = None,
) -> list[ActionSample]:
    """Generate action samples using a named preset."""
    return ReplayPipeline(config_for_preset(preset), sink).run(elements, approach_rate)
