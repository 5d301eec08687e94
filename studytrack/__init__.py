"""studytrack - academic productivity tracker with auto-prioritised tasks."""
