"""Bitmap font for the printable ASCII range (space to tilde).

Each glyph is 30 rows tall. A row is an integer whose low ``GLYPH_WIDTH``
bits give the pixels, with the most significant of those bits leftmost.
"""

from __future__ import annotations

GLYPH_WIDTH = 15
GLYPH_HEIGHT = 30
FIRST_CHAR = 0x20
LAST_CHAR = 0x7E

_FONT: tuple[tuple[int, ...], ...] = (
    # ' '
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '!'
    (0x0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x180, 0x180, 0x180, 0x180, 0x180, 0x0, 0x0, 0x0, 0x1C0,
     0x3C0, 0x3C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '"'
    (0xC38, 0x1E38, 0x1E38, 0xE38, 0xE38, 0xC38, 0xC38, 0xC38, 0xC30, 0xC10,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '#'
    (0x0, 0x0, 0x318, 0x318, 0x318, 0x210, 0x630, 0x738, 0x3FFE, 0x3FFE,
     0x630, 0x630, 0x630, 0x630, 0x3FFC, 0x3FFC, 0x3FFC, 0xC60, 0xC60, 0xC60,
     0xC60, 0xC60, 0x18C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '$'
    (0x180, 0x180, 0x3E0, 0x7F0, 0xFF8, 0xE18, 0x1C00, 0x1C00, 0x1E00, 0xF00,
     0xF80, 0x7C0, 0x3F0, 0x1F8, 0x78, 0x3C, 0x1C, 0x1C, 0x1C, 0x183C,
     0x1FF8, 0x1FF0, 0x7E0, 0x180, 0x180, 0x180, 0x80, 0x0, 0x0, 0x0),
    # '%'
    (0x0, 0x0, 0x1E00, 0x3F04, 0x330E, 0x730C, 0x6318, 0x6338, 0x6330, 0x3320,
     0x3700, 0x1E00, 0x800, 0x3C, 0x7C, 0x6C6, 0xCC6, 0x1CC6, 0x18C6, 0x38C6,
     0x30C6, 0x7C, 0x3C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '&'
    (0x0, 0x380, 0x7C0, 0xFE0, 0xC60, 0xC60, 0xC60, 0xC60, 0xEE0, 0xFC0,
     0xF80, 0x70E, 0xF0E, 0x1F8E, 0x1F8C, 0x39DC, 0x39FC, 0x38F8, 0x3878, 0x387C,
     0x3CFE, 0x1FFE, 0xFC4, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # "'"
    (0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x180, 0x180, 0x80,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '('
    (0x38, 0x70, 0xE0, 0x1E0, 0x1C0, 0x380, 0x380, 0x380, 0x700, 0x700,
     0x700, 0x700, 0x700, 0x700, 0x700, 0x700, 0x700, 0x700, 0x700, 0x300,
     0x380, 0x380, 0x180, 0x1C0, 0xE0, 0xE0, 0x70, 0x38, 0x0, 0x0),
    # ')'
    (0xE00, 0xF00, 0x700, 0x380, 0x1C0, 0x1C0, 0xC0, 0xE0, 0xE0, 0xE0,
     0x60, 0x70, 0x70, 0x70, 0x70, 0x70, 0x70, 0x60, 0xE0, 0xE0,
     0xE0, 0xC0, 0x1C0, 0x380, 0x380, 0x700, 0xE00, 0xE00, 0x0, 0x0),
    # '*'
    (0x180, 0x180, 0x180, 0x1FF8, 0xFF8, 0x3E0, 0x3E0, 0x760, 0x630, 0x420,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '+'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x180, 0x180, 0x180, 0x180, 0x180,
     0x180, 0x3FFE, 0x3FFE, 0x1C0, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # ','
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3C0,
     0x3E0, 0x3E0, 0x1E0, 0x60, 0xC0, 0xC0, 0x380, 0x300, 0x200, 0x0),
    # '-'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0xFF0, 0xFF0, 0xFF0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '.'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x1C0,
     0x3C0, 0x3C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '/'
    (0xC, 0xC, 0x1C, 0x18, 0x18, 0x30, 0x30, 0x30, 0x60, 0x60,
     0xE0, 0xC0, 0xC0, 0x180, 0x180, 0x180, 0x300, 0x300, 0x300, 0x600,
     0x600, 0xE00, 0xC00, 0xC00, 0x1800, 0x1800, 0x1800, 0x3000, 0x0, 0x0),
    # '0'
    (0x0, 0x0, 0x3E0, 0x7F0, 0xFF0, 0xE38, 0x1C38, 0x1C1C, 0x1C1C, 0x1C1C,
     0x3C1C, 0x3C1C, 0x3C1C, 0x3C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C38, 0xE38,
     0xF78, 0x7F0, 0x3E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '1'
    (0x0, 0x0, 0x1C0, 0x7C0, 0xFC0, 0xFC0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1FFC, 0x1FFC, 0x1FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '2'
    (0x0, 0x0, 0x7E0, 0x1FF0, 0x3FF0, 0x1838, 0x38, 0x38, 0x38, 0x38,
     0x38, 0x78, 0x70, 0xF0, 0xE0, 0x1C0, 0x3C0, 0x780, 0x700, 0xE00,
     0x1FFC, 0x3FFC, 0x3FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '3'
    (0x0, 0x0, 0x7E0, 0x1FF0, 0x1FF8, 0x1838, 0x38, 0x38, 0x38, 0x38,
     0xF0, 0x3E0, 0x3E0, 0x3F0, 0x78, 0x38, 0x1C, 0x1C, 0x1C, 0x1838,
     0x3EF8, 0x1FF0, 0xFE0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '4'
    (0x0, 0x0, 0xF0, 0xF0, 0x1F0, 0x1F0, 0x3F0, 0x370, 0x770, 0x670,
     0xE70, 0xC70, 0x1C70, 0x1870, 0x3878, 0x3FFC, 0x3FFC, 0x78, 0x70, 0x70,
     0x70, 0x70, 0x70, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '5'
    (0x0, 0x0, 0xFF8, 0xFF8, 0xFF8, 0xE00, 0xE00, 0xE00, 0xC00, 0xC00,
     0xFE0, 0x1FF0, 0xC78, 0x38, 0x3C, 0x1C, 0x1C, 0x1C, 0x3C, 0x1038,
     0x3EF8, 0x1FF0, 0xFE0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '6'
    (0x0, 0x0, 0x1F0, 0x7F8, 0x7F8, 0xE08, 0x1E00, 0x1C00, 0x1C00, 0x1C00,
     0x1CE0, 0x1FF0, 0x1FF8, 0x1E3C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0xE1C,
     0xF78, 0x7F0, 0x3E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '7'
    (0x0, 0x0, 0x1FFC, 0x1FFC, 0x1FFC, 0x38, 0x38, 0x70, 0x70, 0xE0,
     0xE0, 0xE0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x3C0, 0x380, 0x380, 0x380,
     0x380, 0x380, 0x380, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '8'
    (0x0, 0x0, 0x7E0, 0xFF0, 0xE78, 0x1C38, 0x1C18, 0x1C18, 0x1C18, 0x1E38,
     0xF30, 0x7F0, 0x7E0, 0xFF0, 0x1C78, 0x1C3C, 0x381C, 0x381C, 0x381C, 0x1C1C,
     0x1E3C, 0xFF8, 0x7F0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '9'
    (0x0, 0x0, 0x7C0, 0xFE0, 0x1E70, 0x1C38, 0x1C38, 0x381C, 0x381C, 0x381C,
     0x1C1C, 0x1C3C, 0x1FFC, 0xFFC, 0x79C, 0x1C, 0x1C, 0x38, 0x38, 0x878,
     0x1CF0, 0x1FE0, 0xFC0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # ':'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x180, 0x3C0, 0x3C0,
     0x3C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x1C0,
     0x3C0, 0x3C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # ';'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x180, 0x3C0, 0x3C0,
     0x3C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3C0,
     0x3E0, 0x3E0, 0x1E0, 0x60, 0xC0, 0xC0, 0x380, 0x300, 0x200, 0x0),
    # '<'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x6, 0x1E, 0xFE, 0x3F0,
     0x1F80, 0x3E00, 0x3C00, 0x3F00, 0x7E0, 0x1FC, 0x3E, 0xE, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '='
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3FFC, 0x3FFE, 0x3FFE,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x3FFE, 0x3FFE, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '>'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x2000, 0x3C00, 0x3F00, 0xFE0,
     0x1F8, 0x3C, 0x1C, 0xFC, 0x7F0, 0x3F80, 0x3E00, 0x3000, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '?'
    (0x0, 0x7E0, 0xFF0, 0x1E78, 0x838, 0x38, 0x38, 0x38, 0x38, 0x70,
     0xF0, 0xE0, 0x1C0, 0x1C0, 0x380, 0x380, 0x0, 0x0, 0x0, 0x3C0,
     0x3C0, 0x3C0, 0x3C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '@'
    (0x0, 0x0, 0x1E0, 0x7F0, 0xF38, 0xC1C, 0x1C0C, 0x180C, 0x380C, 0x380C,
     0x301C, 0x307C, 0x31FC, 0x31CC, 0x338C, 0x338C, 0x338C, 0x339C, 0x31FC, 0x31E4,
     0x3800, 0x1800, 0x1800, 0x1C00, 0xE00, 0x738, 0x3F8, 0xE0, 0x0, 0x0),
    # 'A'
    (0x0, 0x0, 0x3E0, 0x3E0, 0x7E0, 0x7E0, 0x770, 0x770, 0x670, 0xE70,
     0xE70, 0xE38, 0xE38, 0xC38, 0x1FF8, 0x1FF8, 0x1FFC, 0x1C1C, 0x381C, 0x381C,
     0x381C, 0x380E, 0x380E, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'B'
    (0x0, 0x0, 0x1FE0, 0x1FF8, 0x1C78, 0x1C3C, 0x1C3C, 0x1C3C, 0x1C38, 0x1C38,
     0x1EF0, 0x1FE0, 0x1FF8, 0x1C3C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C,
     0x1FF8, 0x1FF0, 0x1FE0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'C'
    (0x0, 0xE0, 0x3F8, 0x7FC, 0xF9C, 0xE00, 0x1E00, 0x1C00, 0x1C00, 0x1C00,
     0x3C00, 0x3C00, 0x3C00, 0x3C00, 0x3C00, 0x1C00, 0x1C00, 0x1C00, 0x1E00, 0xF0C,
     0xFFE, 0x7FC, 0x1F8, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'D'
    (0x0, 0x0, 0x1FC0, 0x1FF0, 0x1CF0, 0x1C78, 0x1C38, 0x1C3C, 0x1C1C, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C, 0x1C38, 0x1C78,
     0x1FF0, 0x1FE0, 0x1F80, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'E'
    (0x0, 0x0, 0x1FFC, 0x1FFC, 0x1E00, 0x1E00, 0x1E00, 0x1E00, 0x1E00, 0x1E00,
     0x1FF0, 0x1FF0, 0x1FF0, 0x1E00, 0x1E00, 0x1E00, 0x1E00, 0x1E00, 0x1E00, 0x1E00,
     0x1FFC, 0x1FFC, 0x1FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'F'
    (0x0, 0x0, 0xFFC, 0xFFC, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00,
     0xE00, 0xFF8, 0xFF8, 0xFF8, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00,
     0xE00, 0xE00, 0xE00, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'G'
    (0x0, 0xE0, 0x3F8, 0x7FC, 0xF1C, 0x1E08, 0x1C00, 0x1C00, 0x1C00, 0x3C00,
     0x3C00, 0x3800, 0x387C, 0x3C7C, 0x3C1C, 0x3C1C, 0x1C1C, 0x1C1C, 0x1E1C, 0xE1C,
     0xFFC, 0x7FC, 0x3F8, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'H'
    (0x0, 0x0, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1FFC, 0x1FFC, 0x1FFC, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C1C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'I'
    (0x0, 0x0, 0x1FFC, 0x1FFC, 0x3C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1FFC, 0x1FFC, 0x1FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'J'
    (0x0, 0x0, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38,
     0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x38, 0x1838,
     0x1FF8, 0x1FF0, 0x7E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'K'
    (0x0, 0x0, 0x1C1C, 0x1C3C, 0x1C38, 0x1C70, 0x1C70, 0x1CE0, 0x1CE0, 0x1DC0,
     0x1DE0, 0x1FE0, 0x1FE0, 0x1FF0, 0x1E70, 0x1E70, 0x1C38, 0x1C38, 0x1C38, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C0E, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'L'
    (0x0, 0x0, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00,
     0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00,
     0xFFC, 0xFFC, 0xFFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'M'
    (0x0, 0x0, 0x3C1C, 0x3C1C, 0x3C3C, 0x3C3C, 0x3E3C, 0x3E3C, 0x3E7C, 0x3E6C,
     0x3B6C, 0x3B4C, 0x3BCC, 0x39CC, 0x39CC, 0x398C, 0x398C, 0x380C, 0x380C, 0x380C,
     0x380C, 0x380C, 0x380C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'N'
    (0x0, 0x0, 0x1C1C, 0x1E1C, 0x1E1C, 0x1E1C, 0x1F1C, 0x1F1C, 0x1B1C, 0x1B1C,
     0x199C, 0x199C, 0x199C, 0x18DC, 0x18DC, 0x18DC, 0x18FC, 0x187C, 0x187C, 0x187C,
     0x183C, 0x183C, 0x183C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'O'
    (0x0, 0x1C0, 0x7F0, 0xFF0, 0x1E78, 0x1C38, 0x1C1C, 0x3C1C, 0x3C1C, 0x381C,
     0x381C, 0x381C, 0x381C, 0x381C, 0x381C, 0x381C, 0x3C1C, 0x1C1C, 0x1C3C, 0x1E38,
     0xFF8, 0xFF0, 0x3E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'P'
    (0x0, 0x0, 0x1FF0, 0x1FF8, 0x1C7C, 0x1C1C, 0x1C1C, 0x1C1E, 0x1C1E, 0x1C1C,
     0x1C1C, 0x1C3C, 0x1FF8, 0x1FF0, 0x1FC0, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00,
     0x1C00, 0x1C00, 0x1C00, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'Q'
    (0x0, 0x1C0, 0x7F0, 0xFF0, 0x1E78, 0x1C38, 0x1C1C, 0x3C1C, 0x3C1C, 0x381C,
     0x381C, 0x381C, 0x381C, 0x381C, 0x381C, 0x381C, 0x3C1C, 0x1C1C, 0x1C3C, 0x1C38,
     0xF78, 0xFF0, 0x3E0, 0x1C0, 0x1C0, 0xF0, 0x7E, 0x3E, 0xC, 0x0),
    # 'R'
    (0x0, 0x0, 0x1FF0, 0x1FF8, 0x1C7C, 0x1C3C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1C3C, 0x1C78, 0x1FF8, 0x1FE0, 0x1CE0, 0x1CF0, 0x1C70, 0x1C70, 0x1C38, 0x1C38,
     0x1C3C, 0x1C1C, 0x1C1E, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'S'
    (0x0, 0x1C0, 0x7F0, 0xFF8, 0x1E38, 0x1C00, 0x1C00, 0x1C00, 0x1E00, 0x1F00,
     0xF80, 0x7E0, 0x3F0, 0xF8, 0x7C, 0x3C, 0x1C, 0x1C, 0x81C, 0x1C3C,
     0x3FF8, 0x1FF8, 0x7E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'T'
    (0x0, 0x0, 0x3FFE, 0x3FFE, 0x3C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'U'
    (0x0, 0x0, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C,
     0x1FF8, 0xFF8, 0x7E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'V'
    (0x0, 0x0, 0x381E, 0x381C, 0x381C, 0x3C1C, 0x1C1C, 0x1C1C, 0x1C38, 0x1C38,
     0xE38, 0xE38, 0xE38, 0xE30, 0xE70, 0x670, 0x770, 0x760, 0x760, 0x7E0,
     0x3E0, 0x3E0, 0x3C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'W'
    (0x0, 0x0, 0x7006, 0x7006, 0x3006, 0x300E, 0x300E, 0x31CE, 0x31CE, 0x39CE,
     0x39CC, 0x39CC, 0x3BCC, 0x3BCC, 0x3B6C, 0x1B6C, 0x1A6C, 0x1E7C, 0x1E7C, 0x1E3C,
     0x1E3C, 0x1E38, 0x1C38, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'X'
    (0x0, 0x0, 0x3C1C, 0x1C1C, 0x1C38, 0xE38, 0xE38, 0xE70, 0x770, 0x7E0,
     0x3E0, 0x3E0, 0x3C0, 0x3E0, 0x7E0, 0x770, 0xE70, 0xE70, 0xE38, 0x1C38,
     0x1C3C, 0x3C1C, 0x381C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'Y'
    (0x0, 0x0, 0x381E, 0x3C1C, 0x1C1C, 0x1C38, 0x1C38, 0xE38, 0xE30, 0xE70,
     0x770, 0x7E0, 0x3E0, 0x3E0, 0x3C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'Z'
    (0x0, 0x0, 0x1FFC, 0x1FFC, 0x3C, 0x38, 0x78, 0x70, 0xF0, 0xE0,
     0x1E0, 0x1C0, 0x3C0, 0x380, 0x780, 0x700, 0x700, 0xE00, 0xE00, 0x1C00,
     0x1FFC, 0x3FFC, 0x3FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '['
    (0x3F8, 0x3F8, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300,
     0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x300,
     0x300, 0x300, 0x300, 0x300, 0x300, 0x300, 0x3F8, 0x3F8, 0x0, 0x0),
    # '\\'
    (0x3000, 0x1800, 0x1800, 0x1800, 0xC00, 0xC00, 0xE00, 0x600, 0x600, 0x300,
     0x300, 0x300, 0x180, 0x180, 0x180, 0xC0, 0xC0, 0xE0, 0x60, 0x60,
     0x30, 0x30, 0x30, 0x18, 0x18, 0x18, 0xC, 0xC, 0x0, 0x0),
    # ']'
    (0xFC0, 0xFC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0,
     0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0,
     0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xFC0, 0xFC0, 0x0, 0x0),
    # '^'
    (0x0, 0x1C0, 0x3C0, 0x3C0, 0x3E0, 0x760, 0x660, 0x670, 0xE30, 0xE30,
     0xC38, 0x1C18, 0x1C1C, 0x181C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '_'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x1FFC, 0x1FFC, 0x0, 0x0, 0x0),
    # '`'
    (0x780, 0x380, 0x180, 0x1C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'a'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7E0, 0x1FF8, 0xE78,
     0x38, 0x3C, 0x1C, 0xFC, 0x7FC, 0xF1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C,
     0x1E7C, 0x1FFC, 0xF9C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'b'
    (0x0, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1DF0, 0x1FF8, 0x1F78,
     0x1E3C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C, 0x1C3C,
     0x1F78, 0x1FF0, 0x19E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'c'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3F8, 0x7FC, 0xF98,
     0xE00, 0x1E00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1E00, 0xE00,
     0xF9C, 0x7FC, 0x3F8, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'd'
    (0x0, 0x3C, 0x3C, 0x3C, 0x3C, 0x3C, 0x3C, 0x7FC, 0xFFC, 0x1F7C,
     0x1E3C, 0x1C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x1C3C, 0x1C3C,
     0x1E7C, 0xFFC, 0x79C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'e'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3F0, 0x7F8, 0xF38,
     0x1C1C, 0x1C1C, 0x1C1C, 0x3C1C, 0x3FFC, 0x3FFC, 0x3C00, 0x1C00, 0x1C00, 0x1E00,
     0xF18, 0x7F8, 0x3F8, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'f'
    (0x38, 0xFE, 0x1FE, 0x1C0, 0x3C0, 0x380, 0x380, 0x1FFC, 0x1FFC, 0x1FF8,
     0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380,
     0x380, 0x380, 0x380, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'g'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7FE, 0xFFE, 0x1E7C,
     0x1C30, 0x1C38, 0x1C38, 0x1C38, 0x1C30, 0xE70, 0xFE0, 0xD80, 0x1C00, 0x1C00,
     0x1E00, 0xFFC, 0xFFC, 0x1C1E, 0x180E, 0x380E, 0x381C, 0x1E7C, 0xFF8, 0x3C0),
    # 'h'
    (0x0, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1CF8, 0x1FF8, 0x1FFC,
     0x1E1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C1C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'i'
    (0xE0, 0x1E0, 0x1E0, 0xE0, 0x0, 0x0, 0x0, 0x1FE0, 0x1FE0, 0x1FE0,
     0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0,
     0xE0, 0xE0, 0xE0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'j'
    (0xE0, 0x1E0, 0x1E0, 0xE0, 0x0, 0x0, 0x0, 0x1FE0, 0x1FE0, 0x1FE0,
     0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0,
     0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0xE0, 0x1BE0, 0x3FC0, 0x3F80, 0x0),
    # 'k'
    (0x0, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C1C, 0x1C3C, 0x1C38,
     0x1C70, 0x1CF0, 0x1CE0, 0x1DC0, 0x1FE0, 0x1FE0, 0x1FF0, 0x1E70, 0x1C38, 0x1C38,
     0x1C1C, 0x1C1C, 0x1C1E, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'l'
    (0x0, 0x1F80, 0x1F80, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380,
     0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x380, 0x3C0,
     0x1E8, 0x1FC, 0xFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'm'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x37BC, 0x3FFC, 0x3FFE,
     0x39CE, 0x398E, 0x398E, 0x398E, 0x398E, 0x398E, 0x398E, 0x398E, 0x398E, 0x398E,
     0x398E, 0x398E, 0x398E, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'n'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x18F8, 0x1FF8, 0x1FFC,
     0x1E1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C,
     0x1C1C, 0x1C1C, 0x1C1C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'o'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7E0, 0xFF0, 0x1F78,
     0x1C3C, 0x1C1C, 0x3C1C, 0x3C1C, 0x381C, 0x381C, 0x3C1C, 0x3C1C, 0x1C1C, 0x1C3C,
     0x1F78, 0xFF0, 0x7E0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'p'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x19F0, 0x1FF8, 0x1F78,
     0x1E3C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C1C, 0x1C3C, 0x1C3C,
     0x1F78, 0x1FF0, 0x1DE0, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x1C00, 0x0),
    # 'q'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7DC, 0xFFC, 0x1F7C,
     0x1C3C, 0x1C3C, 0x3C3C, 0x3C3C, 0x383C, 0x383C, 0x3C3C, 0x3C3C, 0x1C3C, 0x1C3C,
     0x1E7C, 0xFFC, 0x7BC, 0x3C, 0x3C, 0x3C, 0x3C, 0x3C, 0x3C, 0x0),
    # 'r'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0xE7C, 0xEFC, 0xFFC,
     0xF80, 0xF00, 0xF00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00, 0xE00,
     0xE00, 0xE00, 0xE00, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 's'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7F0, 0xFF8, 0x1E38,
     0x1C00, 0x1C00, 0x1E00, 0xF80, 0x7E0, 0x1F8, 0x78, 0x3C, 0x1C, 0x1C,
     0x1C3C, 0x1FF8, 0xFF0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 't'
    (0x0, 0x0, 0x0, 0x380, 0x380, 0x380, 0x380, 0x3FFC, 0x3FFC, 0x1FF8,
     0x780, 0x780, 0x780, 0x780, 0x780, 0x780, 0x780, 0x780, 0x780, 0x380,
     0x3C0, 0x3FC, 0x1FC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'u'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3C3C, 0x3C3C, 0x3C3C,
     0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C3C, 0x3C7C,
     0x1FFC, 0x1FDC, 0xF9C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'v'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x381E, 0x381C, 0x3C1C,
     0x1C1C, 0x1C18, 0x1C38, 0xE38, 0xE38, 0xE30, 0xE70, 0x770, 0x760, 0x7E0,
     0x3E0, 0x3E0, 0x3C0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'w'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x7006, 0x7186, 0x71CE,
     0x31CE, 0x31CE, 0x31CE, 0x3BCE, 0x3B4C, 0x3B4C, 0x3B6C, 0x1A7C, 0x1E7C, 0x1E7C,
     0x1E3C, 0x1E38, 0x1E38, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'x'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x3C1C, 0x1C3C, 0x1E38,
     0xE38, 0x770, 0x7E0, 0x3E0, 0x3C0, 0x3C0, 0x7E0, 0x7F0, 0xE70, 0xE78,
     0x1C38, 0x1C3C, 0x381C, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # 'y'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x381E, 0x381C, 0x1C1C,
     0x1C1C, 0x1C18, 0xE38, 0xE38, 0xE38, 0x630, 0x770, 0x770, 0x370, 0x3E0,
     0x3E0, 0x1E0, 0x1C0, 0x1C0, 0x1C0, 0x380, 0x1F80, 0x1F00, 0x1E00, 0x0),
    # 'z'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0xFFC, 0xFFC, 0xFF8,
     0x38, 0x70, 0xE0, 0xE0, 0x1C0, 0x3C0, 0x380, 0x700, 0xF00, 0xE00,
     0x1FFC, 0x1FFC, 0x1FFC, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
    # '{'
    (0xF8, 0x1F8, 0x1C0, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180,
     0x180, 0x180, 0x380, 0xF00, 0xF00, 0x380, 0x180, 0x180, 0x180, 0x180,
     0x180, 0x180, 0x180, 0x180, 0x180, 0x1C0, 0x1F8, 0xF8, 0x0, 0x0),
    # '|'
    (0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180,
     0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180,
     0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180, 0x180),
    # '}'
    (0xF00, 0xF80, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x180, 0x180,
     0x180, 0x1C0, 0x1E0, 0x78, 0xF8, 0x1E0, 0x1C0, 0x180, 0x180, 0x1C0,
     0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0x1C0, 0xF80, 0xF00, 0x0, 0x0),
    # '~'
    (0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x1F00, 0x3F86, 0x31FE, 0x20FC, 0x30, 0x0, 0x0, 0x0, 0x0, 0x0,
     0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0),
)


def glyph(char: str) -> tuple[int, ...]:
    """Return the 30 row bitmaps of a printable ASCII character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if not FIRST_CHAR <= code <= LAST_CHAR:
        raise ValueError(f"no glyph for character {char!r}")
    return _FONT[code - FIRST_CHAR]


def _row_text(bits: int, on: str, off: str) -> str:
    return "".join(
        on if bits >> (GLYPH_WIDTH - 1 - column) & 1 else off
        for column in range(GLYPH_WIDTH)
    )


def glyph_rows(char: str, on: str = "#", off: str = " ") -> list[str]:
    """Draw one character as text rows, using ``on`` and ``off`` for pixels."""
    return [_row_text(bits, on, off) for bits in glyph(char)]


def render(text: str, on: str = "#", off: str = " ") -> list[str]:
    """Draw a line of text as rows of pixels, characters side by side."""
    if not text:
        return [""] * GLYPH_HEIGHT
    columns = [glyph_rows(char, on, off) for char in text]
    return ["".join(parts) for parts in zip(*columns)]