import logging

import cv2
import numpy as np
from geometry import *

logger = logging.getLogger(__name__)


def blankCanvas(shape):
    """Creates an all black RGB image to draw on.

    Args:
        shape: The shape of the image : (rows, columns, channels)

    Returns:
        A zeroed uint8 numpy array.
    """

    return np.zeros(shape, dtype=np.uint8)

def toPixel(image, point : Point, scale=1):
    """Converts a point in geometry space to pixel space.

    Geometry space has y growing upwards while images have row 0 at the top, so the y axis
    is flipped around the bottom row of the image.

    Args:
        image: The image the point will be drawn on.
        point: The point to convert.
        scale: The number of pixels per geometry unit.

    Returns:
        The pixel location as a (column, row) tuple, the order cv2 expects.
    """

    return (int(point.x * scale), int(image.shape[0] - 1 - point.y * scale))

def drawPoint(image, point : Point, color, radius=2, scale=1):
    """Draws a filled circle at the location of a point.

    Args:
        image: The RGB image to draw on. It is modified in place.
        point: The point to draw.
        color: The RGB color of the circle.
        radius: The radius of the circle in pixels.
        scale: The number of pixels per geometry unit.

    Returns:
        The image that was drawn on.
    """

    _checkImage(image)
    center = toPixel(image, point, scale)
    logger.debug('draw_point point=%r pixel=%s', point, center)
    cv2.circle(image, center, radius, color, -1)
    return image

def drawRectangle(image, rect : Rectangle, color, thickness=1, scale=1):
    """Draws the outline of a rectangle.

    Inverted and degenerate rectangles are drawn between their two corners as they are.

    Args:
        image: The RGB image to draw on. It is modified in place.
        rect: The rectangle to draw.
        color: The RGB color of the outline.
        thickness: The width of the outline in pixels. A negative thickness fills the rectangle.
        scale: The number of pixels per geometry unit.

    Returns:
        The image that was drawn on.
    """

    _checkImage(image)
    pt1 = toPixel(image, rect.bottom_left, scale)
    pt2 = toPixel(image, rect.top_right, scale)
    logger.debug('draw_rectangle rect=%r pixels=%s,%s', rect, pt1, pt2)
    cv2.rectangle(image, pt1, pt2, color, thickness)
    return image

def _checkImage(image):
    if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] != 3:
        raise ValueError('Expected an RGB image with shape (rows, columns, 3), got {0}.'.format(getattr(image, 'shape', type(image).__name__)))
