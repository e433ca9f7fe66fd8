import os

# ==== paged menu config constants / env vars ====
DEFAULT_ITEMS_PER_PAGE = int(os.getenv("PAGED_MENU_ITEMS_PER_PAGE", 10))
MENU_TIMEOUT = float(os.getenv("PAGED_MENU_TIMEOUT", 180))  # seconds before a menu stops listening
