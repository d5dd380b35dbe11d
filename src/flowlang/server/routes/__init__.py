"""Route builders for the Flow API."""
