"""Central settings and UI constants for popups."""

WIDTH, HEIGHT = 960, 640

# === TIMING ===

ANIMATION_DURATION = 0.3  # seconds, show and hide
SCRIM_SHOW_RATIO = 0.8  # scrim fade-in runs for this share of the duration
SCRIM_HIDE_DELAY_RATIO = 0.2  # scrim fade-out waits this share, then runs the rest
SHOW_EASING = 'backOut'
HIDE_EASING = 'backIn'

# === OPACITY ===

SCRIM_OPACITY = 200
PANEL_OPACITY = 255

# === COLOR PALETTE ===

BG_COLOR = (22, 38, 46)
SCRIM_COLOR = (0, 0, 0)
PANEL_BG = (40, 55, 70)
TEXT_PRIMARY = (235, 225, 210)
TEXT_MUTED = (160, 170, 165)
TEXT_WHITE = (255, 255, 255)
BTN_CONFIRM_COLOR = (60, 120, 80)
BTN_CONFIRM_HOVER = (80, 160, 110)

# Font sizes
FONT_SIZE_TITLE = 36
FONT_SIZE_BODY = 24
FONT_SIZE_BUTTON = 26

# Layout dimensions
ALERT_PANEL_SIZE = (420, 240)
ALERT_BUTTON_SIZE = (140, 44)
BORDER_RADIUS_PANEL = 12
BORDER_RADIUS_BUTTON = 6
