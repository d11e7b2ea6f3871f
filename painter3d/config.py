#
# PROJECT: painter3d
# MODULE: painter3d/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and the terminal surface."""
    use_color: bool = True
    use_braille: bool = True
    use_facing: bool = True
    opacity: float = 1.0
    frame_interval: float = 0.030
    pixel_scale: float = 0.5
    line_width: float = 3.0

    def __post_init__(self):
        self.set_opacity(self.opacity)

    def set_opacity(self, value: float):
        """Clamp and store the opacity multiplied into default styles."""
        self.opacity = max(0.0, min(1.0, float(value)))

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
