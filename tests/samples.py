"""Reference colors shared by the test modules.

Keys are unit RGB triples, values are (hue in degrees, unit, unit).
"""

samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.5, 0.0, 1.0): (270.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.25, 0.5, 0.75): (210.0, 2 / 3, 0.75),
}

samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.5, 0.0, 1.0): (270.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.25, 0.5, 0.75): (210.0, 0.5, 0.5),
}

samples_hsv_hsl = {
    samples_rgb_hsv[rgb]: samples_rgb_hsl[rgb]
    for rgb in samples_rgb_hsv
}
