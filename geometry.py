import operator

import numpy as np


class Point:
    """A mutable point class used to represent a 2 dimensional integer coordinate.

    Coordinates are held as 32 bit signed integers, so moving a point past the int32 range
    wraps around silently. Coordinates and offsets must be integers; anything else raises a TypeError.
    """

    def __init__(self, x=0, y=0):
        self.__xy = np.array([operator.index(x), operator.index(y)], dtype=np.int32)

    @classmethod
    def fromArray(cls, values):
        """Create a new point from an array_like object.

        Args:
            values: An array_like object with two number objects.

        Returns:
            A new point object.
        """

        values = np.asarray(values).reshape(-1)
        if values.shape[0] != 2:
            raise ValueError('Expected 2 values for a point, got {0}.'.format(values.shape[0]))

        return cls(int(values[0]), int(values[1]))

    def move(self, dx, dy):
        """Translates this point in place.

        Args:
            dx: The amount to add to the x coordinate.
            dy: The amount to add to the y coordinate.

        """

        self.__xy += np.array([operator.index(dx), operator.index(dy)], dtype=np.int32)

    def toArray(self):
        return self.__xy.copy()

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self.__xy, other.__xy))

    # points are mutable
    __hash__ = None

    def __repr__(self):
        return '{0}({1}, {2})'.format(type(self).__name__, self.x, self.y)

    def __copy__(self):
        return type(self)(self.x, self.y)

    def __deepcopy__(self, memo):
        return type(self)(self.x, self.y)

    @property
    def x(self):
        return int(self.__xy[0])

    @property
    def y(self):
        return int(self.__xy[1])


class Rectangle:
    """An axis aligned rectangle defined by its bottom left and top right corners.

    The corners are not checked for order. A rectangle whose top right corner lies south or
    west of its bottom left corner reports negative widths and heights.
    """

    def __init__(self, bottom_left : Point = None, top_right : Point = None):
        self.__bottom_left = Point() if bottom_left is None else Point(bottom_left.x, bottom_left.y)
        self.__top_right = Point() if top_right is None else Point(top_right.x, top_right.y)

    def move(self, dx, dy):
        """Translates both corners of this rectangle in place by the same amount.

        Args:
            dx: The amount to shift the rectangle along x.
            dy: The amount to shift the rectangle along y.

        """

        self.__bottom_left.move(dx, dy)
        self.__top_right.move(dx, dy)

    @property
    def bottom_left(self):
        return Point(self.__bottom_left.x, self.__bottom_left.y)

    @property
    def top_right(self):
        return Point(self.__top_right.x, self.__top_right.y)

    @property
    def width(self):
        return int(self.__size()[0])

    @property
    def height(self):
        return int(self.__size()[1])

    @property
    def area(self):
        return int(np.prod(self.__size(), dtype=np.int32))

    @property
    def isNormalized(self):
        """True when the top right corner is neither south nor west of the bottom left corner."""
        return bool(np.all(self.__size() >= 0))

    def __size(self):
        return self.__top_right.toArray() - self.__bottom_left.toArray()

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.__bottom_left == other.__bottom_left and self.__top_right == other.__top_right

    __hash__ = None

    def __repr__(self):
        return '{0}({1!r}, {2!r})'.format(type(self).__name__, self.__bottom_left, self.__top_right)

    def __copy__(self):
        return type(self)(self.__bottom_left, self.__top_right)

    def __deepcopy__(self, memo):
        return type(self)(self.__bottom_left, self.__top_right)
