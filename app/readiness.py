# readiness.py

from enum import Enum


class ReadinessState(str, Enum):
    STARTING = "starting"
    READY = "ready"


class ReadinessTracker:
    """
    Write-once readiness flag backing the health probe.

    Starts in STARTING and moves to READY once, when startup has finished.
    Nothing moves it back, so readers only ever see false then true.
    """

    def __init__(self):
        self._state = ReadinessState.STARTING

    def init(self):
        """ Put the tracker into STARTING. Has no effect once it is READY. """
        if self._state is not ReadinessState.READY:
            self._state = ReadinessState.STARTING

    def mark_ready(self):
        """ One-shot STARTING -> READY transition; repeated calls are no-ops. """
        self._state = ReadinessState.READY

    @property
    def state(self) -> ReadinessState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ReadinessState.READY


def health_payload(tracker: ReadinessTracker):
    """ Map readiness to the health endpoint status code and body. """
    if tracker.is_ready:
        return 200, {"message": "Healthy", "code": 200, "successful": True}
    return 503, {"message": "Unhealthy", "code": 503, "successful": False}
