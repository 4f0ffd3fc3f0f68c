#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and the driver loop."""
    width: int = 80
    height: int = 40
    fov: float = 90.0
    camera_distance: float = 3.0
    near_clip: float = 0.1
    screen_scale: float = 1.0
    mesh_size: float = 12.0
    mark_char: str = '.'
    blank_char: str = ' '
    frame_delay: float = 0.1   # seconds between frames
    x_step: float = 5.7        # degrees per frame about X
    y_step: float = 11.5       # degrees per frame about Y
    use_ansi: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError on settings the pipeline cannot work with."""
        if self.width < 2 or self.height < 2:
            raise ValueError(f"grid must be at least 2x2, got {self.width}x{self.height}")
        if not 0 < self.fov < 180:
            raise ValueError(f"fov must be in (0, 180) degrees, got {self.fov}")
        if self.near_clip < 0:
            raise ValueError(f"near_clip must be >= 0, got {self.near_clip}")
        if not self.mesh_size > 0:
            raise ValueError(f"mesh_size must be > 0, got {self.mesh_size}")
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must be >= 0, got {self.frame_delay}")
        if len(self.mark_char) != 1 or len(self.blank_char) != 1:
            raise ValueError("mark_char and blank_char must be single characters")
        if self.mark_char == self.blank_char:
            raise ValueError("mark_char and blank_char must differ")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Default config adjusted to the terminal named in TERM.
        Dumb terminals get plain output without cursor escapes.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown')
        overrides.setdefault('use_ansi', not is_dumb)
        return cls(**overrides)
