# Grid size in cells.
MAZE_W = 21
MAZE_H = 15

# Pixel geometry.
CELL = 32
PAD = 16
GOAL_INSET = 6
PLAYER_INSET = 8

# Opaque sRGB colours.
BG_COLOR = (15, 15, 18)
WALL_COLOR = (230, 230, 230)
GOAL_COLOR = (40, 160, 70)
PLAYER_COLOR = (220, 60, 70)

TITLE_PLAYING = "Maze - Reach the green goal (R to regenerate)"
TITLE_WON = "You win! Press R to regenerate, Esc to quit"

FPS = 60
