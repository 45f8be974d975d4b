# ── Session lifetime ──────────────────────────────────────────────────────────
# Access tokens and their backing session rows share one lifetime; logout ends
# the session row early.
SESSION_EXPIRE_SECONDS: int = 86_400  # 24 hours

# ── Usernames ─────────────────────────────────────────────────────────────────
USERNAME_MAX_LENGTH: int = 50
PASSWORD_MIN_LENGTH: int = 1

# Rendered in place of a username whose account no longer exists
DELETED_USER_PLACEHOLDER: str = "DELETED_USER"
