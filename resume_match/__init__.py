"""Resume Match: compare a resume with a job description using Gemini."""

__version__ = "1.0.0"
