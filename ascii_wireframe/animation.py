#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class AnimationState:
    """
    Accumulated rotation angles (degrees), owned and advanced by the driver
    loop. The render pipeline only reads them.
    """
    __slots__ = ('angle_x', 'angle_y', 'frame')

    def __init__(self, angle_x: float = 0.0, angle_y: float = 0.0):
        self.angle_x = angle_x % 360.0
        self.angle_y = angle_y % 360.0
        self.frame = 0

    def __repr__(self):
        return f"AnimationState(angle_x={self.angle_x:.2f}, angle_y={self.angle_y:.2f})"

    def advance(self, dx: float, dy: float):
        """Add per-frame deltas, wrapped into [0, 360)."""
        self.angle_x = (self.angle_x + dx) % 360.0
        self.angle_y = (self.angle_y + dy) % 360.0
        self.frame += 1

    def reset(self):
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.frame = 0
