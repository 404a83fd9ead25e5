"""
Render pipeline: step script, timeline, compositing, encoding, export and preview
"""

__all__ = [
    "step_generator",
    "timeline",
    "canvas",
    "compositor",
    "encoder",
    "compressor",
    "export_driver",
    "preview_loop",
]
