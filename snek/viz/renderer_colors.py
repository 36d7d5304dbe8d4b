# snek/viz/renderer_colors.py
BG = (255, 255, 255)
GRID = (0, 160, 0)
HEAD = (0, 120, 0)
BODY = (0, 200, 0)
TEXT = (30, 30, 30)

# indexed by snek.core.fruit.FRUIT_PALETTE
FRUIT = {
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
}
