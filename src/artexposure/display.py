"""
Display metrics

Find the pixel height of the primary display, which is the target height for resized artwork.
macOS reports resolutions through system_profiler, X11/GNOME sessions through xrandr. When neither
works the configured FALLBACK_DISPLAY_HEIGHT is used.
"""

import re
import subprocess
import sys

from artexposure.config import config
from artexposure.cli_utils.console import log
from artexposure.cli_utils.console import warn

# system_profiler lists the scaled "UI Looks like" size on retina displays, which matches
# the points used for the desktop; the raw "Resolution" line is the fallback. xrandr's
# "current" size spans every monitor, so the primary output comes first.
RESOLUTION_PATTERNS = {
    "darwin": (
        ["system_profiler", "SPDisplaysDataType"],
        (r"UI Looks like: (\d+) x (\d+)", r"Resolution: (\d+) x (\d+)"),
    ),
    "linux": (
        ["xrandr", "--current"],
        (r"connected primary (\d+)x(\d+)\+", r"current (\d+) x (\d+)"),
    ),
}


def parse_height(output: str, patterns) -> int:
    """Return the height from the first pattern that matches output, or None."""

    for pattern in patterns:
        match = re.search(pattern, output)
        if match is not None:
            return int(match.group(2))

    return None


def get_display_height(platform: str = sys.platform) -> int:
    """
    Query the primary display height in pixels, falling back to FALLBACK_DISPLAY_HEIGHT.
    """

    fallback = config.FALLBACK_DISPLAY_HEIGHT
    key = "linux" if platform.startswith("linux") else platform

    try:
        cmd, patterns = RESOLUTION_PATTERNS[key]

    except KeyError:
        warn(f"Can't detect the display size on {platform}, using a height of {fallback}px.")
        return fallback

    try:
        process = subprocess.run(
            cmd, capture_output=True, text=True, check=True, timeout=10
        )

    except (OSError, subprocess.SubprocessError) as error:
        warn(f"Could not read the display size ({error}), using a height of {fallback}px.")
        return fallback

    height = parse_height(process.stdout, patterns)
    if not height:
        warn(f"Could not read the display size, using a height of {fallback}px.")
        return fallback

    log("display height is %dpx", height)
    return height
