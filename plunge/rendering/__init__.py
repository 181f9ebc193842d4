"""Rendering-side helpers for plunge projections."""

from plunge.rendering.frame_primitives import clip_rects, visibility_timeline
from plunge.rendering.recording_surface import RecordingSurface

__all__ = ["RecordingSurface", "clip_rects", "visibility_timeline"]
