"""Small motion helpers: a random shake and a vertically scrolling list."""

import random


class Shake:
    """Jitters a position around its starting point for a given duration."""

    def __init__(self, duration, strength_x, strength_y, rng=None):
        if duration < 0:
            raise ValueError("duration must not be negative")
        self.duration = duration
        self.strength_x = strength_x
        self.strength_y = strength_y
        self._rng = rng if rng is not None else random.Random()
        self.initial = None
        self.position = None

    @classmethod
    def with_strength(cls, duration, strength):
        """Create a shake with the same strength on both axes."""
        return cls(duration, strength, strength)

    def _range_rand(self, low, high):
        return self._rng.random() * (high - low) + low

    def start(self, position):
        """Remember the starting position of the shaken node."""
        x, y = position
        self.initial = (x, y)
        self.position = (x, y)

    def update(self, dt):
        """Move to a random offset from the start, scaled by ``dt``."""
        if self.initial is None:
            raise RuntimeError("shake has not been started")
        dx = self._range_rand(-self.strength_x, self.strength_x) * dt
        dy = self._range_rand(-self.strength_y, self.strength_y) * dt
        x, y = self.initial
        self.position = (x + dx, y + dy)
        return self.position

    def stop(self):
        """Put the node back where it started and return that position."""
        if self.initial is None:
            raise RuntimeError("shake has not been started")
        self.position = self.initial
        return self.position


class ScrollLayer:
    """A layer dragged vertically by touch, clamped to its row range."""

    def __init__(self, total_rows=100, line_height=26, min_y=154, position_y=0.0):
        self.total_rows = total_rows
        self.line_height = line_height
        self.min_y = min_y
        self.position_y = position_y
        self._prev_y = None

    @property
    def _top(self):
        return self.total_rows * self.line_height

    def touch_began(self):
        """Start a drag; the layer always claims the touch."""
        self._prev_y = None
        return True

    def touch_moved(self, y):
        """Follow the finger to ``y`` and return the new position."""
        if self._prev_y is None:
            self._prev_y = y
            return self.position_y
        distance = y - self._prev_y
        if self.position_y < self._top or distance < 0:
            self.position_y += distance
        self._prev_y = y
        return self.position_y

    def touch_ended(self):
        """End a drag, snapping the position into range; return it."""
        self._prev_y = None
        if self.position_y > self._top - self.line_height:
            self.position_y = self._top
        if self.position_y < self.min_y:
            self.position_y = self.min_y
        return self.position_y


class ScrollItem:
    """A rectangular row of a scroll layer that reveals its menu on tap."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.menu_visible = False
        self.delegate = None
        self.lock_item = None

    def contains(self, x, y):
        """Whether the point, in the item's own space, lies inside it."""
        return 0 <= x <= self.width and 0 <= y <= self.height

    def touch_began(self, x, y):
        """Claim the touch only when it falls on the item."""
        return self.contains(x, y)

    def touch_ended(self):
        self.menu_visible = True