"""Install subsystem — archive fetching, liveness, and daemon lifecycle."""

from zeppctl.install.fetcher import ArchiveFetcher
from zeppctl.install.lifecycle import LifecycleController
from zeppctl.install.liveness import AssumeStopped, HttpLivenessCheck, LivenessCheck

__all__ = [
    "ArchiveFetcher",
    "AssumeStopped",
    "HttpLivenessCheck",
    "LifecycleController",
    "LivenessCheck",
]
