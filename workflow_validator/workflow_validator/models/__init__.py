"""Data models shared by the dispatcher and the per-version validators."""
