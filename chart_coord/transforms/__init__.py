"""
Transformers
============

Stateless forward/inverse vector maps sharing one factory signature
``(params, x, y, width, height) -> Transformer`` so that a pipeline can
hold any mix of them.
"""

from chart_coord.transforms.affine import (
    matrix,
    reflect,
    reflect_x,
    reflect_y,
    rotate,
    scale,
    shear_x,
    shear_y,
    translate,
    transpose,
)
from chart_coord.transforms.cartesian import cartesian, custom
from chart_coord.transforms.fisheye import fisheye, fisheye_circular, fisheye_x, fisheye_y
from chart_coord.transforms.helix import helix
from chart_coord.transforms.parallel import parallel
from chart_coord.transforms.pipeline import TRANSFORMS, TransformPipeline, create_transformer
from chart_coord.transforms.polar import polar, polar_rho, polar_theta
from chart_coord.transforms.types import Transformer, TransformerFactory, Vector2

__all__ = [
    'Transformer',
    'TransformerFactory',
    'Vector2',
    'TransformPipeline',
    'TRANSFORMS',
    'create_transformer',
    'translate',
    'scale',
    'rotate',
    'reflect',
    'reflect_x',
    'reflect_y',
    'shear_x',
    'shear_y',
    'matrix',
    'transpose',
    'cartesian',
    'custom',
    'polar',
    'polar_theta',
    'polar_rho',
    'helix',
    'parallel',
    'fisheye',
    'fisheye_x',
    'fisheye_y',
    'fisheye_circular',
]
