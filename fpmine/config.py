# --- input ---
DEFAULT_SEPARATOR = "\t"  # item separator in transactional files

# --- output ---
PATTERN_SUPPORT_SEPARATOR = ":"  # pattern<sep>support in saved pattern files

# --- logging ---
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
