"""
Paul Tol's color-blind friendly sequential schemes.

Color schemes copyright (c) 2022 Paul Tol <https://personal.sron.nl/~pault/>.
The values are published constants and are used verbatim.
"""

from domain.sequence import ColorSequence
from shared.constants import RAINBOW_PURPLE_START, RAINBOW_PURPLE_STOP

# Incandescent: https://personal.sron.nl/~pault/#fig:scheme_incandescent
# Not print friendly.
INCANDESCENT_RGB: tuple[tuple[int, int, int], ...] = (
    (206, 255, 255),
    (198, 247, 214),
    (162, 244, 155),
    (187, 228, 83),
    (213, 206, 4),
    (231, 181, 3),
    (241, 153, 3),
    (246, 121, 11),
    (249, 73, 2),
    (228, 5, 21),
    (168, 0, 3),
)

# Iridescent: https://personal.sron.nl/~pault/#fig:scheme_iridescent
IRIDESCENT_RGB: tuple[tuple[int, int, int], ...] = (
    (254, 251, 233),
    (252, 247, 213),
    (245, 243, 193),
    (234, 240, 181),
    (221, 236, 191),
    (208, 231, 202),
    (194, 227, 210),
    (181, 221, 216),
    (168, 216, 220),
    (155, 210, 225),
    (141, 203, 228),
    (129, 196, 231),
    (123, 188, 231),
    (126, 178, 228),
    (136, 165, 221),
    (147, 152, 210),
    (155, 138, 196),
    (157, 125, 178),
    (154, 112, 158),
    (144, 99, 136),
    (128, 87, 112),
    (104, 73, 87),
    (70, 53, 58),
)

# Smooth rainbow: https://personal.sron.nl/~pault/#fig:scheme_rainbow_smooth
# Does not have to be used over the full range.
RAINBOW_RGB: tuple[tuple[int, int, int], ...] = (
    (232, 236, 251),
    (221, 216, 239),
    (209, 193, 225),
    (195, 168, 209),
    (181, 143, 194),
    (167, 120, 180),
    (155, 98, 167),
    (140, 78, 153),
    (111, 76, 155),  # purple
    (96, 89, 169),
    (85, 104, 184),
    (78, 121, 197),
    (77, 138, 198),
    (78, 150, 188),
    (84, 158, 179),
    (89, 165, 169),
    (96, 171, 158),
    (105, 177, 144),
    (119, 183, 125),
    (140, 188, 104),
    (166, 190, 84),
    (190, 188, 72),
    (209, 181, 65),
    (221, 170, 60),
    (228, 156, 57),
    (231, 140, 53),
    (230, 121, 50),
    (228, 99, 45),
    (223, 72, 40),
    (218, 34, 34),  # red
    (184, 34, 30),
    (149, 33, 27),
    (114, 30, 23),
    (82, 26, 19),
)

INCANDESCENT = ColorSequence(INCANDESCENT_RGB)
IRIDESCENT = ColorSequence(IRIDESCENT_RGB)
RAINBOW = ColorSequence(RAINBOW_RGB)

# Smooth rainbow from purple to red (view into RAINBOW, no copy)
RAINBOW_PURPLE_TO_RED = RAINBOW[RAINBOW_PURPLE_START:RAINBOW_PURPLE_STOP]
