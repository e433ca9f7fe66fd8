# ==== discord limits ====
EMBED_DESC_MAX = 4096

# ==== formatting ====
ELLIPSIS = "…"
