"""
Draw styles and scoped drawing helpers.

Every draw call takes an immutable DrawStyle and leaves the cairo context
exactly as it found it. Cairo has no native drop shadows, so shadows are
rasterised separately: the element's coverage is drawn to a scratch A8
surface, blurred and composited in device space before the element itself.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Literal

import cairo
import numpy as np
from scipy import ndimage

RGBA = Tuple[float, float, float, float]
PathBuilder = Callable[[cairo.Context], None]


@dataclass(frozen=True)
class Shadow:
    alpha: float          # opacity of the black shadow colour
    blur: float = 2.0     # canvas-style blur radius, sigma = blur / 2
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass(frozen=True)
class DrawStyle:
    color: RGBA
    mode: Literal['fill', 'stroke'] = 'fill'
    line_width: float = 1.0
    shadow: Optional[Shadow] = None
    alpha: float = 1.0    # global alpha applied to the element and its shadow


@contextmanager
def saved_state(ctx: cairo.Context):
    """Scope transform and style changes to the block."""
    ctx.save()
    try:
        yield ctx
    finally:
        ctx.restore()


@contextmanager
def composited(ctx: cairo.Context, alpha: float):
    """Draw the block into a group, then paint it with the given alpha."""
    ctx.push_group()
    try:
        yield ctx
    except BaseException:
        ctx.pop_group()
        raise
    ctx.pop_group_to_source()
    ctx.paint_with_alpha(alpha)


def _apply(ctx: cairo.Context, style: DrawStyle):
    if style.mode == 'stroke':
        ctx.set_line_width(style.line_width)
        ctx.stroke()
    else:
        ctx.fill()


def _coverage(ctx: cairo.Context, build_path: PathBuilder, style: DrawStyle) -> np.ndarray:
    """Rasterise the element's coverage with the context's current transform."""
    target = ctx.get_target()
    width, height = target.get_width(), target.get_height()

    scratch = cairo.ImageSurface(cairo.FORMAT_A8, width, height)
    sctx = cairo.Context(scratch)
    sctx.set_matrix(ctx.get_matrix())
    build_path(sctx)
    _apply(sctx, style)
    scratch.flush()

    arr = np.ndarray(
        shape=(height, scratch.get_stride()),
        dtype=np.uint8,
        buffer=scratch.get_data()
    )
    return arr[:, :width].astype(np.float32) / 255.0


def paint_shadow(ctx: cairo.Context, build_path: PathBuilder, style: DrawStyle):
    shadow = style.shadow
    coverage = _coverage(ctx, build_path, style)
    if shadow.blur > 0:
        coverage = ndimage.gaussian_filter(coverage, sigma=shadow.blur / 2)

    height, width = coverage.shape
    stride = cairo.ImageSurface.format_stride_for_width(cairo.FORMAT_A8, width)
    mask_data = np.zeros((height, stride), dtype=np.uint8)
    mask_data[:, :width] = np.clip(np.rint(coverage * 255), 0, 255).astype(np.uint8)
    mask = cairo.ImageSurface.create_for_data(mask_data, cairo.FORMAT_A8, width, height, stride)

    # Shadow offsets are in device space, unaffected by the seal rotation
    with saved_state(ctx):
        ctx.identity_matrix()
        ctx.set_source_rgba(0.0, 0.0, 0.0, shadow.alpha * style.alpha)
        ctx.mask_surface(mask, shadow.offset_x, shadow.offset_y)


def paint_path(ctx: cairo.Context, build_path: PathBuilder, style: DrawStyle):
    """Fill or stroke the path produced by build_path, shadow first."""
    if style.shadow is not None:
        paint_shadow(ctx, build_path, style)

    with saved_state(ctx), composited(ctx, style.alpha):
        ctx.new_path()
        build_path(ctx)
        ctx.set_source_rgba(*style.color)
        _apply(ctx, style)
