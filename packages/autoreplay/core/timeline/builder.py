"""Timeline builder: merges elements into one ordered event timeline.

The builder sweeps elements by start time, plus one terminal step one
millisecond past the last element's end. Along the way it keeps:

- One spin session. Overlapping spin zones extend the session end instead
  of opening a second session; the session contributes exactly one spin
  start and one spin end marker.
- The set of active hold paths, each with a ``HoldPathTracker``. At every
  sweep point all trackers are drained of samples earlier than the sweep
  time. When a single uninterrupted hold path is active, its path is also
  traced between checkpoints at a fixed interval.

After the sweep, events between a hold entry and its hold end are marked as
sliding so hits landing inside a hold are seen as happening mid-hold.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from autoreplay.core.config.models import GeneratorConfig
from autoreplay.core.diagnostics import DiagnosticLevel, EventSink, NullSink
from autoreplay.core.models.elements import (
    Element,
    HoldPathElement,
    SpinZoneElement,
    TapElement,
)
from autoreplay.core.models.events import AbstractEvent
from autoreplay.core.models.geometry import CURSOR_ANCHOR
from autoreplay.core.timeline.ordering import EventOrdering
from autoreplay.core.timeline.timeline import Timeline
from autoreplay.core.timeline.tracker import HoldPathTracker

logger = logging.getLogger(__name__)

# Lead time (ms) of the resting anchor before the first element
ANCHOR_LEAD_MS = 1000.0
# Terminal sweep step past the last end time (ms)
SWEEP_TAIL_MS = 1.0


def validate_elements(
    elements: Sequence[Element],
    legacy_offset: float | None = None,
) -> None:
    """Reject hold paths that cannot produce any sub-event.

    Raises:
        MalformedHoldPathError: For the first malformed hold path.
    """
    for index, element in enumerate(elements):
        if isinstance(element, HoldPathElement):
            HoldPathTracker(element, index=index, legacy_offset=legacy_offset)


class TimelineBuilder:
    """Builds an ordered ``Timeline`` from a start-time-sorted element list.

    Input order is the caller's responsibility; unsorted input is not
    validated and produces an unspecified merge.

    Args:
        config: Generator configuration (follow settings, ordering policy,
            legacy offset override).
        sink: Diagnostic event sink. Defaults to a no-op sink.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        sink: EventSink | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.sink = sink or NullSink()
        self.ordering = EventOrdering(self.config.ordering)

    def build(self, elements: Sequence[Element]) -> Timeline:
        timeline = Timeline(self.ordering)
        if not elements:
            return timeline

        timeline.insert(
            AbstractEvent(time=elements[0].start_time - ANCHOR_LEAD_MS, position=CURSOR_ANCHOR)
        )

        trackers: list[HoldPathTracker] = []
        spin_end: float | None = None
        last_hold_time: float | None = None
        followable = True

        final_time = elements[-1].end_time + SWEEP_TAIL_MS

        for index in range(len(elements) + 1):
            final = index == len(elements)
            element = None if final else elements[index]
            time = final_time if element is None else element.start_time

            if spin_end is not None and (final or time > spin_end):
                self._insert(timeline, AbstractEvent(time=spin_end, spin_end=True))
                spin_end = None

            if trackers and (final or last_hold_time is None or time > last_hold_time):
                drain_until = time
                if final:
                    # The last element may end before an earlier, longer hold
                    drain_until = max(t.path.end_time for t in trackers) + SWEEP_TAIL_MS

                follow = self.config.follow.enabled and followable and len(trackers) == 1
                trackers = self._drain(timeline, trackers, drain_until, follow)

                last_hold_time = time if trackers else None

            if element is None:
                break

            # Following resets once every hold has drained; anything arriving
            # while a hold or spin is active interrupts it
            followable = not trackers and spin_end is None

            key = index + 1

            if isinstance(element, SpinZoneElement):
                if spin_end is None:
                    spin_end = element.end_time
                    self._insert(timeline, AbstractEvent(time=element.start_time, spin_start=True))
                else:
                    spin_end = max(spin_end, element.end_time)
                continue

            if isinstance(element, HoldPathElement):
                trackers.append(
                    HoldPathTracker(
                        element,
                        index=index,
                        legacy_offset=self.config.legacy_last_tick_offset,
                    )
                )
                self._insert(
                    timeline,
                    AbstractEvent(
                        time=element.start_time,
                        position=element.stacked_position,
                        circle_hit=True,
                        hold_slide=True,
                        hold_tick=True,
                        key=key,
                    ),
                )
                if last_hold_time is None:
                    last_hold_time = element.start_time
                continue

            if isinstance(element, TapElement):
                self._insert(
                    timeline,
                    AbstractEvent(
                        time=element.start_time,
                        position=element.stacked_position,
                        circle_hit=True,
                        key=key,
                    ),
                )

        self._mark_sliding(timeline)

        self.sink.emit(
            "timeline.built",
            DiagnosticLevel.INFO,
            elements=len(elements),
            events=len(timeline),
        )
        logger.debug(f"Built timeline with {len(timeline)} events from {len(elements)} elements")
        return timeline

    def _insert(self, timeline: Timeline, event: AbstractEvent) -> None:
        index = timeline.insert(event)
        self.sink.emit("timeline.event_inserted", index=index, **event.describe())

    def _drain(
        self,
        timeline: Timeline,
        trackers: list[HoldPathTracker],
        until: float,
        follow: bool,
    ) -> list[HoldPathTracker]:
        """Drain every tracker up to ``until`` and return the ones still active."""
        still_active: list[HoldPathTracker] = []

        for tracker in trackers:
            previous = tracker.last_time

            for sample in tracker.drain_before(until):
                if follow:
                    self._follow(timeline, tracker.path, previous, sample.time)
                previous = sample.time

                if sample.terminal:
                    # Hold end also carries the tick facet to avoid a same-time miss
                    self._insert(
                        timeline,
                        AbstractEvent(
                            time=sample.time,
                            position=sample.position,
                            hold_tick=True,
                            hold_end=True,
                        ),
                    )
                else:
                    self._insert(
                        timeline,
                        AbstractEvent(
                            time=sample.time,
                            position=sample.position,
                            hold_tick=True,
                            hold_slide=True,
                        ),
                    )

            if not tracker.exhausted:
                still_active.append(tracker)

        return still_active

    def _follow(
        self,
        timeline: Timeline,
        path: HoldPathElement,
        start: float,
        end: float,
    ) -> None:
        """Trace the path between two drained samples at the follow interval."""
        interval = self.config.follow.interval
        time = start + interval
        while time < end:
            self._insert(
                timeline,
                AbstractEvent(time=time, position=path.position_at_time(time), hold_slide=True),
            )
            time += interval

    def _mark_sliding(self, timeline: Timeline) -> None:
        active_holds = 0
        for index in range(len(timeline)):
            event = timeline[index]
            if event.is_hold_entry:
                active_holds += 1
            if event.hold_end:
                active_holds = max(0, active_holds - 1)
            if active_holds > 0 and not event.hold_slide:
                timeline.replace(index, event.sliding())


def build_timeline(
    elements: Sequence[Element],
    config: GeneratorConfig | None = None,
    sink: EventSink | None = None,
) -> Timeline:
    """Build a timeline with a one-off ``TimelineBuilder``."""
    return TimelineBuilder(config, sink).build(elements)
