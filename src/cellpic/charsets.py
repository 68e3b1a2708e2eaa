BLOCK_LIGHT = "░"
BLOCK_MEDIUM = "▒"
BLOCK_DARK = "▓"
BLOCK_FULL = "█"
BLOCK_UPPER_HALF = "▀"

# Density ramp indexed by quantized luma level. Level 0 leaves the cell untouched, so its
# entry is never drawn; levels past the end use the last glyph
DENSITY_RAMP = ("", BLOCK_LIGHT, BLOCK_MEDIUM, BLOCK_DARK, BLOCK_FULL)

# Box drawing: horizontal, vertical, top-left, top-right, bottom-left, bottom-right
PLAIN_BORDER = "─│┌┐└┘"
ROUNDED_BORDER = "─│╭╮╰╯"
DOUBLE_BORDER = "═║╔╗╚╝"
THICK_BORDER = "━┃┏┓┗┛"
