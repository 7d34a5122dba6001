"""Calendar-week domain."""
