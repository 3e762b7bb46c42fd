"""
Chat Environment Detection

Decides whether a chat assistant is present in the running host. Three
signals are checked in a fixed order and the first match wins:

1. Application name contains a marker (case-insensitive)
2. An installed extension id starts with a known prefix
3. The host URI scheme matches
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..host import HostEnvironment

logger = logging.getLogger(__name__)


class DetectionMethod(Enum):
    """Detection tiers, in evaluation order."""
    APP_NAME = "app-name"
    EXTENSIONS = "extensions"
    URI_SCHEME = "uri-scheme"


@dataclass(frozen=True)
class DetectionProfile:
    """
    Signals identifying one chat assistant.

    Attributes:
        name: Assistant name used in log messages
        app_name_marker: Substring searched in the application name
        extension_prefix: Prefix matched against installed extension ids
        uri_scheme: Expected host URI scheme
        require_active_extension: Ignore matching extensions that are not activated
    """
    name: str
    app_name_marker: str
    extension_prefix: str
    uri_scheme: str
    require_active_extension: bool = False


@dataclass
class DetectionResult:
    """Outcome of running the detection chain for one profile."""
    name: str
    detected: bool
    method: Optional[DetectionMethod] = None
    evidence: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "detected": self.detected,
            "method": self.method.value if self.method else None,
            "evidence": self.evidence,
        }


class EnvironmentDetector:
    """
    Runs detection profiles against a host environment.

    Example:
        detector = EnvironmentDetector(HostEnvironment(app_name="Cursor"))
        detector.detect(CURSOR_AI_PROFILE).detected  # True, via app name
    """

    def __init__(self, environment: HostEnvironment):
        self.environment = environment

    def detect(self, profile: DetectionProfile) -> DetectionResult:
        """Evaluate the three tiers for profile; the first matching tier wins."""
        app_name = self.environment.app_name or ""
        app_match = profile.app_name_marker.lower() in app_name.lower() if profile.app_name_marker else False
        logger.debug(f"{profile.name}: app-name check on {app_name!r} -> {app_match}")
        if app_match:
            return DetectionResult(profile.name, True, DetectionMethod.APP_NAME, app_name)

        matching = [
            ext for ext in self.environment.extension_ids
            if profile.extension_prefix and ext.startswith(profile.extension_prefix)
        ]
        if profile.require_active_extension:
            inactive = set(self.environment.inactive_extension_ids)
            matching = [ext for ext in matching if ext not in inactive]
        logger.debug(f"{profile.name}: extensions check found {len(matching)} match(es)")
        if matching:
            return DetectionResult(profile.name, True, DetectionMethod.EXTENSIONS, matching[0])

        scheme = self.environment.uri_scheme or ""
        scheme_match = bool(profile.uri_scheme) and scheme == profile.uri_scheme
        logger.debug(f"{profile.name}: uri-scheme check on {scheme!r} -> {scheme_match}")
        if scheme_match:
            return DetectionResult(profile.name, True, DetectionMethod.URI_SCHEME, scheme)

        logger.debug(f"{profile.name}: not detected by any method")
        return DetectionResult(profile.name, False)


CURSOR_AI_PROFILE = DetectionProfile(
    name="Cursor AI Assistant",
    app_name_marker="cursor",
    extension_prefix="cursor.",
    uri_scheme="cursor",
)

CLAUDE_CODE_PROFILE = DetectionProfile(
    name="Claude Code Chat",
    app_name_marker="claude",
    extension_prefix="anthropic.claude-code",
    uri_scheme="claude",
    require_active_extension=True,
)
