"""Battery data collectors."""
