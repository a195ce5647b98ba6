"""Infrastructure — file and template I/O at the edges of a run."""
