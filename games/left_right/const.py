# Gameplay
START_DELAY_SEC     = 1.0     # countdown after <Space> before the side is revealed

# Layout (all sizes scale with the window width, tuned for 512 px)
BASE_WIDTH          = 512
BASE_FONT_SIZE      = 32
BASE_PADDING        = 20

# Colors
BACKGROUND_COLOR    = (128, 128, 128)
TEXT_COLOR          = (255, 255, 255)
PANEL_LEVEL         = 0.5     # red intensity of an idle panel
HIGHLIGHT_DIFF      = 0.125   # brighter / darker step for the revealed side
