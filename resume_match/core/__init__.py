"""Core application logic: input capture, analysis workflow and session state."""
