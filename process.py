import argparse
import logging
from copy import copy

from matplotlib import image as mpimg
from geometry import *
from canvas import *
from data import *

logger = logging.getLogger(__name__)


def describe(name, rect : Rectangle):
    """Summarizes a rectangle on a single line.

    Args:
        name: A label for the rectangle.
        rect: The rectangle to summarize.

    Returns:
        A string with the corners, width, height and area of the rectangle.
    """

    bl = rect.bottom_left
    tr = rect.top_right
    return '{0}: bottom_left=({1}, {2}) top_right=({3}, {4}) width={5} height={6} area={7}'.format(
        name, bl.x, bl.y, tr.x, tr.y, rect.width, rect.height, rect.area)

def run(output=None):
    """Builds the sample rectangle, moves it and renders both positions.

    Args:
        output: An optional path to save the rendered image to.

    Returns:
        The rectangle before the move, the rectangle after the move and the rendered image.
    """

    # 1) build the rectangle from the sample corners
    print("Building rectangle...")
    before = Rectangle(sampleBottomLeft(), sampleTopRight())
    logger.info(describe('before', before))

    # 2) move a copy so the original position can still be drawn
    print("Moving rectangle...")
    dx, dy = sampleTranslation()
    after = copy(before)
    after.move(dx, dy)
    logger.info(describe('after', after))

    # 3) render both positions and the corners of the moved rectangle
    print("Rendering...")
    scale = canvasScale()
    image = blankCanvas(canvasShape())
    drawRectangle(image, before, rectangleColor(), scale=scale)
    drawRectangle(image, after, movedRectangleColor(), scale=scale)
    drawPoint(image, after.bottom_left, cornerColor(), scale=scale)
    drawPoint(image, after.top_right, cornerColor(), scale=scale)

    if output is not None:
        mpimg.imsave(output, image)
        logger.info('saved image to %s', output)

    return before, after, image

def main(argv=None):
    parser = argparse.ArgumentParser(description='Build, move and draw a sample rectangle.')
    parser.add_argument('--output', help='path of the image to write, e.g. rectangle.png')
    parser.add_argument('--verbose', action='store_true', help='enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    run(args.output)
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
