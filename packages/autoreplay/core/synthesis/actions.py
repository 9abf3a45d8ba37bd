"""Action synthesizer: walks a timeline and emits input samples.

State is a hand (nothing held, primary or secondary) plus a spinning flag.
Every non-marker event yields one sample at its own time and position with
the current hand's buttons. On top of that the synthesizer inserts:

- Spin samples along a circle between events while a spin session is open.
- Release samples when the button has been eligible for release and the
  gap to the next event exceeds ``release.wait + reaction_time``.
- Up to two parked "anti-rebind" samples before the next event when a
  reaction time is configured, so later smoothing does not drift the cursor
  into a false re-engagement.
- A closing release after the last event if a button is still held.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from autoreplay.core.config.models import GeneratorConfig
from autoreplay.core.diagnostics import DiagnosticLevel, EventSink, NullSink
from autoreplay.core.models.actions import ActionSample, Hand, SampleOrigin
from autoreplay.core.models.events import AbstractEvent
from autoreplay.core.models.geometry import CURSOR_ANCHOR, Vector2
from autoreplay.core.synthesis.spin import spin_samples

logger = logging.getLogger(__name__)


def _origin_for(event: AbstractEvent) -> SampleOrigin:
    if event.circle_hit:
        return SampleOrigin.HIT
    if event.hold_slide or event.hold_tick or event.hold_end:
        return SampleOrigin.HOLD
    return SampleOrigin.ANCHOR


class ActionSynthesizer:
    """Converts an ordered event timeline into action samples.

    Args:
        config: Generator configuration (release and spin settings).
        reaction_time: Resolved reaction time in milliseconds.
        sink: Diagnostic event sink. Defaults to a no-op sink.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        reaction_time: float = 0.0,
        sink: EventSink | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.reaction_time = max(0.0, reaction_time)
        self.sink = sink or NullSink()

    def synthesize(self, timeline: Iterable[AbstractEvent]) -> list[ActionSample]:
        events = list(timeline)
        if not events:
            return []

        release = self.config.release
        samples: list[ActionSample] = []

        hand = Hand.UNSET
        release_eligible = False
        spinning = False

        first = events[0]
        last_time = first.time
        last_position: Vector2 = first.position or CURSOR_ANCHOR
        if first.spin_start:
            hand = hand.engaged()
            spinning = True
        elif not first.is_marker:
            samples.append(
                ActionSample(
                    time=first.time,
                    position=last_position,
                    buttons=hand.buttons,
                    origin=SampleOrigin.ANCHOR,
                )
            )

        for event in events[1:]:
            gap = event.time - last_time
            if release_eligible and not spinning and gap > release.wait + self.reaction_time:
                release_time = min(last_time + release.delay, event.time)
                samples.append(
                    ActionSample(
                        time=release_time,
                        position=last_position,
                        origin=SampleOrigin.RELEASE,
                    )
                )
                self.sink.emit("actions.release", time=release_time, gap=gap)
                hand = Hand.UNSET
                release_eligible = False

                if self.reaction_time > 0.0:
                    samples.extend(self._anti_rebind(release_time, event.time, last_position))

            if event.spin_start:
                hand = hand.engaged()
                spinning = True
                release_eligible = False
                last_time = event.time
                self.sink.emit("actions.spin_start", time=event.time, hand=hand.value)
                continue

            if spinning:
                spun = list(spin_samples(last_time, event.time, self.config.spin, hand.buttons))
                if spun:
                    samples.extend(spun)
                    last_position = spun[-1].position

            if event.spin_end:
                spinning = False
                # A spin end inside a hold is sliding and keeps the button down
                release_eligible = event.release
                last_time = event.time
                self.sink.emit("actions.spin_end", time=event.time)
                continue

            if event.engage:
                hand = hand.alternated()
                release_eligible = False
            elif event.hold and hand is Hand.UNSET:
                hand = hand.engaged()
                release_eligible = False

            if event.release or (event.circle_hit and not event.hold):
                release_eligible = True

            position = event.position or last_position
            samples.append(
                ActionSample(
                    time=event.time,
                    position=position,
                    buttons=hand.buttons,
                    origin=_origin_for(event),
                )
            )
            last_time = event.time
            last_position = position

        if hand is not Hand.UNSET:
            samples.append(
                ActionSample(
                    time=last_time + release.delay,
                    position=last_position,
                    origin=SampleOrigin.RELEASE,
                )
            )

        self.sink.emit(
            "actions.synthesized",
            DiagnosticLevel.INFO,
            events=len(events),
            samples=len(samples),
        )
        logger.debug(f"Synthesized {len(samples)} action samples from {len(events)} events")
        return samples

    def _anti_rebind(
        self,
        release_time: float,
        next_time: float,
        position: Vector2,
    ) -> list[ActionSample]:
        """Parked samples between a release and the next event."""
        release = self.config.release
        react_at = next_time - self.reaction_time
        parked: list[ActionSample] = []
        for time in (react_at - release.anti_rebind_offset, react_at):
            if release_time + release.anti_rebind_time < time < next_time:
                parked.append(
                    ActionSample(time=time, position=position, origin=SampleOrigin.ANTI_REBIND)
                )
        return parked


def synthesize_actions(
    timeline: Iterable[AbstractEvent],
    config: GeneratorConfig | None = None,
    reaction_time: float = 0.0,
    sink: EventSink | None = None,
) -> list[ActionSample]:
    """Synthesize actions with a one-off ``ActionSynthesizer``."""
    return ActionSynthesizer(config, reaction_time, sink).synthesize(timeline)
