from geometry import Point

def sampleBottomLeft():
    return Point(1, 2)

def sampleTopRight():
    return Point(5, 9)

def sampleTranslation():
    return (3, 4)

def canvasShape():

    # rows, columns, channels of the render target
    return (240, 320, 3)

def canvasScale():

    # pixels per geometry unit
    return 16

def rectangleColor():
    return (255, 255, 255)

def movedRectangleColor():
    return (0, 255, 0)

def cornerColor():
    return (255, 0, 0)
