# viz/renderer_colors.py
BG = (34, 34, 34)
GRID = (48, 48, 48)
HEAD = (76, 175, 80)
BODY_NEAR = (0, 150, 0)      # segment right behind the head
BODY_FAR = (0, 255, 0)       # tail end of the gradient
EYE = (255, 255, 255)
FOOD = (255, 82, 82)
FOOD_SHINE = (255, 168, 168)
TEXT = (230, 230, 230)
TEXT_MUTED = (150, 150, 150)
GAME_OVER = (255, 0, 0)
WON = (255, 215, 0)
OVERLAY = (0, 0, 0, 190)
