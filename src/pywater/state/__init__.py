"""Session state layer.

:class:`~pywater.state.tracker.IntakeTracker` is the only component allowed
to mutate the record map; it applies the arithmetic in
:mod:`pywater.state.policy` and announces every change as a
:class:`~pywater.state.events.TrackerEvent`.
"""
