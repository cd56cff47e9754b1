"""livematch - live football fixtures with matched scores and streams."""
