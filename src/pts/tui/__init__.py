"""Terminal presentation of scored sticks."""
