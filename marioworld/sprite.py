"""Frame bookkeeping for sprite sheets laid out in a grid."""

from __future__ import annotations

from dataclasses import dataclass

from marioworld.geometry import Point2f, Rectf


@dataclass
class Sprite:
    """An animated sheet of ``cols`` x ``rows`` equally sized frames.

    Frames are numbered row by row, starting at zero. The sheet's size is
    given in pixels as ``texture_width`` and ``texture_height``.
    """

    texture_width: float
    texture_height: float
    cols: int = 1
    rows: int = 1
    frame_sec: float = 0.0
    accumulated_sec: float = 0.0
    current_frame: int = 0

    def update(self, elapsed_sec: float) -> None:
        """Advance at most one frame once more than ``frame_sec`` has built up."""
        self.accumulated_sec += elapsed_sec
        if self.accumulated_sec > self.frame_sec:
            self.current_frame += 1
            if self.current_frame >= self.total_frames():
                self.current_frame = 0
            self.accumulated_sec -= self.frame_sec

    def skip_frames(self, amount: int) -> None:
        """Move forwards (or backwards, if negative) by ``amount`` frames, wrapping."""
        self.current_frame = (self.current_frame + amount) % self.total_frames()

    def set_current_frame(self, frame: int) -> None:
        """Jump to a frame; out-of-range numbers wrap around the sheet."""
        self.current_frame = frame % self.total_frames()

    def frame_width(self) -> float:
        return self.texture_width / self.cols

    def frame_height(self) -> float:
        return self.texture_height / self.rows

    def total_frames(self) -> int:
        return self.cols * self.rows

    def source_rect(self) -> Rectf:
        """The part of the sheet holding the current frame.

        ``bottom`` is measured downwards from the top of the sheet and names
        the frame's lower edge.
        """
        width = self.frame_width()
        height = self.frame_height()
        row, col = divmod(self.current_frame, self.cols)
        return Rectf(col * width, (row + 1) * height, width, height)

    def bounds(self, pos: Point2f, scale: float = 1.0) -> Rectf:
        """The rectangle one frame covers when drawn at ``pos`` with ``scale``."""
        rows = self.total_frames() // self.cols
        return Rectf(
            pos.x,
            pos.y,
            self.texture_width / self.cols * scale,
            self.texture_height / rows * scale,
        )