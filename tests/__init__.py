"""Test suite for autoreplay.

Test Structure:
- unit/: Unit tests for individual components
  - models/: Element, event and action models
  - timeline/: Ordering, tracker and timeline builder
  - synthesis/: Action synthesizer, spin and reaction time
  - humanize/: Spline interpolation and trajectory humanizer
  - config/: Config models, presets and loading
  - diagnostics/: Event sinks
  - utils/: Logging and math utilities
- integration/: End-to-end pipeline tests
- factories.py: Element factories
- conftest.py: Shared fixtures
"""
